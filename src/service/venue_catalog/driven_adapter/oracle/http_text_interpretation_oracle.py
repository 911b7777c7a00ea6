"""
HTTP Text Interpretation Oracle

Asks an OpenAI-compatible chat-completions endpoint to read a seating-chart
document and answer with JSON. Every failure mode returns None so the
caller keeps its deterministic result.
"""

import re
from typing import Any, Optional

import httpx
import orjson

from src.platform.config.core_setting import Settings
from src.platform.logging.loguru_io import Logger
from src.service.venue_catalog.app.interface.i_text_interpretation_oracle import (
    ITextInterpretationOracle,
    OracleInterpretation,
    OracleSection,
)


SYSTEM_PROMPT = """You analyze venue seating chart documents (SVG markup, sometimes with a text header).
Return ONLY a JSON object:
{
  "venueName": "name of the venue, or null",
  "sections": [
    {"svgPath": "exact element id from the markup", "name": "Section 101",
     "sectionType": "floor|lower|upper|premium|standard", "isGeneralAdmission": false}
  ]
}
Only list element ids that are seating sections and that appear verbatim in the markup."""

_CODE_FENCE_PATTERN = re.compile(r'^```(?:json)?\s*|\s*```$', re.IGNORECASE)


def parse_oracle_reply(reply: str) -> Optional[OracleInterpretation]:
    """Parse model output, tolerating a markdown code fence around the JSON"""
    text = _CODE_FENCE_PATTERN.sub('', reply.strip())
    try:
        data: Any = orjson.loads(text)
    except orjson.JSONDecodeError:
        return None
    if not isinstance(data, dict):
        return None

    sections = []
    for item in data.get('sections') or []:
        if not isinstance(item, dict) or not isinstance(item.get('svgPath'), str):
            continue
        sections.append(
            OracleSection(
                raw_id=item['svgPath'],
                name=item.get('name') if isinstance(item.get('name'), str) else None,
                section_type=item.get('sectionType'),
                is_general_admission=bool(item.get('isGeneralAdmission', False)),
            )
        )
    venue_name = data.get('venueName')
    return OracleInterpretation(
        venue_name=venue_name.strip() if isinstance(venue_name, str) and venue_name.strip() else None,
        sections=sections,
    )


class HttpTextInterpretationOracle(ITextInterpretationOracle):
    def __init__(self, *, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = settings
        self._transport = transport

    @property
    def enabled(self) -> bool:
        return self.settings.ORACLE_ENABLED

    async def interpret(self, *, content: str) -> Optional[OracleInterpretation]:
        if not self.enabled:
            return None

        payload = {
            'model': self.settings.ORACLE_MODEL,
            'messages': [
                {'role': 'system', 'content': SYSTEM_PROMPT},
                {'role': 'user', 'content': content[: self.settings.ORACLE_MAX_CONTENT_CHARS]},
            ],
        }
        headers = {
            'Authorization': f'Bearer {self.settings.ORACLE_API_KEY.get_secret_value()}',
            'Content-Type': 'application/json',
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.settings.ORACLE_TIMEOUT_SECONDS, transport=self._transport
            ) as client:
                response = await client.post(
                    self.settings.ORACLE_API_URL, content=orjson.dumps(payload), headers=headers
                )
                response.raise_for_status()
                reply = response.json()['choices'][0]['message']['content']
        except httpx.TimeoutException:
            Logger.base.warning('⏰ [ORACLE] Timed out, falling back')
            return None
        except httpx.HTTPError as e:
            Logger.base.warning(f'⚠️ [ORACLE] Request failed, falling back: {e}')
            return None
        except (KeyError, IndexError, TypeError, ValueError) as e:
            Logger.base.warning(f'⚠️ [ORACLE] Unexpected response shape, falling back: {e}')
            return None

        interpretation = parse_oracle_reply(reply) if isinstance(reply, str) else None
        if interpretation is None:
            Logger.base.warning('⚠️ [ORACLE] Reply is not valid JSON, falling back')
        return interpretation
