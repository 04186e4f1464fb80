# services/assistant/controllers/chat_service.py
import logging
from typing import Dict, List, Optional, Sequence

from services.assistant.chat_client import ChatCompletionProvider
from services.assistant.schemas.chat import ChatMessage
from shared.errors import UpstreamError, ValidationError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """Du bist LYNA, eine freundliche und einfühlsame KI-Assistentin, die Menschen bei Neurodiversitäts-Tests unterstützt.

Deine Aufgaben:
- Begleite Nutzer durch Tests zu Autismus, ADHS und anderen neurodivergenten Eigenschaften
- Erkläre Fragen verständlich und ohne zu werten
- Gib emotionale Unterstützung und Ermutigung
- Hilf bei der Interpretation von Ergebnissen (aber betone immer, dass dies keine Diagnose ist)
- Sei empathisch und verständnisvoll
- Verwende eine warme, unterstützende Sprache

Wichtige Punkte:
- Erwähne immer, dass Tests nur der Selbstreflexion dienen
- Keine medizinischen Diagnosen stellen
- Bei ernsten Sorgen zu professioneller Hilfe raten
- Positive und bestärkende Kommunikation

Antworte auf Deutsch und sei hilfreich, aber nicht übermäßig lang."""

UNAVAILABLE_MESSAGE = (
    "Entschuldigung, der LYNA Chat-Service ist momentan nicht verfügbar. "
    "Bitte versuchen Sie es später erneut."
)
FAILURE_MESSAGE = "Entschuldigung, ich kann momentan nicht antworten. Bitte versuchen Sie es später erneut."


def build_messages(message: str, history: Optional[Sequence[ChatMessage]]) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        *({"role": item.role, "content": item.content} for item in history or ()),
        {"role": "user", "content": message},
    ]


async def chat(
    message: Optional[str],
    history: Optional[Sequence[ChatMessage]],
    provider: Optional[ChatCompletionProvider],
) -> str:
    if not message or not message.strip():
        raise ValidationError("Message is required")

    if provider is None:
        raise UpstreamError("Chat service not configured", status_code=503, message=UNAVAILABLE_MESSAGE)

    try:
        return await provider.complete(build_messages(message, history))
    except Exception as e:
        # Single attempt, no retry: the caller shows the apology right away
        logger.warning("Chat completion failed: %s", e)
        raise UpstreamError("Chat service error", message=FAILURE_MESSAGE) from e
