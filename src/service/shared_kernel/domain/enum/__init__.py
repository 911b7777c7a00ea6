"""Shared Kernel Enums"""

from src.service.shared_kernel.domain.enum.section_type import SectionType

__all__ = ['SectionType']
