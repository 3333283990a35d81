"""Core constants: shared literal values.

Single source of truth for user-facing fixed strings and list limits.
"""

# Returned by the assistant when the model produces no text.
ZIA_FALLBACK_RESPONSE = (
    "Lo siento, no pude procesar tu solicitud en este momento. "
    "Por favor, intenta de nuevo."
)

# Pagination for list endpoints
DEFAULT_LIST_LIMIT = 50
MAX_LIST_LIMIT = 500

KG_PER_TONNE = 1000

# Minimum length of a signature data URL (an empty canvas encodes shorter)
MIN_SIGNATURE_LENGTH = 50
