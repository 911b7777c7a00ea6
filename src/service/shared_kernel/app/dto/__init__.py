"""Shared Kernel DTOs - Application Layer"""

from src.service.shared_kernel.app.dto.batch_error_log import BatchErrorLog

__all__ = ['BatchErrorLog']
