"""Shared Kernel Interfaces"""

from src.service.shared_kernel.app.interface.i_section_query_repo import ISectionQueryRepo

__all__ = ['ISectionQueryRepo']
