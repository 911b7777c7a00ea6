"""Shared Kernel Domain Layer"""

from src.service.shared_kernel.domain.entity.section_entity import SectionEntity
from src.service.shared_kernel.domain.enum import SectionType

__all__ = ['SectionEntity', 'SectionType']
