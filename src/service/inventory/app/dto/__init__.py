"""Inventory DTOs"""

from src.service.inventory.app.dto.synthesis_result import DiscountResult, ListingSynthesisResult

__all__ = ['DiscountResult', 'ListingSynthesisResult']
