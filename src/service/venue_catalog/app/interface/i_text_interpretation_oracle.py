"""
Text Interpretation Oracle Interface

Opaque best-effort interpreter (a language model) that reads a map document
and proposes a venue name and section ids. Never required for correctness.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

import attrs


@attrs.define(frozen=True)
class OracleSection:
    raw_id: str
    name: Optional[str] = None
    section_type: Optional[str] = None
    is_general_admission: bool = False


@attrs.define(frozen=True)
class OracleInterpretation:
    venue_name: Optional[str] = None
    sections: List[OracleSection] = attrs.field(factory=list)


class ITextInterpretationOracle(ABC):
    @abstractmethod
    async def interpret(self, *, content: str) -> Optional[OracleInterpretation]:
        """
        Returns:
            The interpretation, or None on timeout, transport failure or
            unparseable output
        """
        pass
