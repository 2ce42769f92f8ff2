"""Response composer.

Turns the top-ranked knowledge entry and the conversation context into
the text returned to the requester.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .retriever import KnowledgeRetriever
from ..models.context import ConversationContext
from ..models.entry import KnowledgeEntry, Role, RoleLike
from ..utils.logger import get_logger

logger = get_logger(__name__)


DEFAULT_RESPONSES: Dict[Role, str] = {
    Role.STUDENT: (
        "That's a great question! I'm here to help you with your learning journey. "
        "Could you tell me more about what specific area you'd like to explore? "
        "I can help with study strategies, understanding your learning style, "
        "or any challenges you're facing at school."
    ),
    Role.TEACHER: (
        "Thank you for that question! As an educator, you're doing important work. "
        "I can help with classroom strategies, behavior management, assessment techniques, "
        "or supporting students with diverse needs. What specific area would you like to focus on?"
    ),
    Role.PARENT: (
        "I appreciate you reaching out! Supporting your child's education is so important. "
        "I can help you understand assessment results, develop home support strategies, "
        "navigate school systems, or advocate for your child's needs. "
        "What would be most helpful for you right now?"
    ),
    Role.PROFESSIONAL: (
        "That's an interesting question, colleague! I'm here to collaborate with you on "
        "supporting students and families. Whether you need consultation on complex cases, "
        "want to discuss latest research, or explore intervention strategies, I'm ready to help. "
        "Could you provide more details about what you're looking for?"
    ),
}

GENERIC_DEFAULT_RESPONSE = (
    "That's a great question! As an Educational Psychologist, I can help you with assessments, "
    "interventions, learning strategies, behavioral support, and restorative justice practices. "
    "Could you tell me more about what specific area you'd like to explore?"
)

FOLLOW_UP_SUGGESTIONS: Dict[Tuple[str, Role], str] = {
    ("restorative_justice", Role.TEACHER):
        "Would you like to explore specific implementation strategies, "
        "or learn about circle processes for your classroom?",
    ("restorative_justice", Role.PARENT):
        "Would you like to know more about how restorative practices can be supported at home?",
    ("restorative_justice", Role.PROFESSIONAL):
        "I can also discuss research findings or help with program implementation planning.",
    ("restorative_justice", Role.STUDENT):
        "Would you like to learn more about how this approach can help with conflicts "
        "or building better relationships?",
    ("assessment", Role.TEACHER):
        "I can also help with interpreting assessment results or selecting appropriate "
        "classroom assessments.",
    ("assessment", Role.PARENT):
        "Would you like help understanding specific assessment results or preparing for school meetings?",
    ("assessment", Role.PROFESSIONAL):
        "I can discuss assessment selection, administration protocols, or interpretation frameworks.",
    ("assessment", Role.STUDENT):
        "Would you like to know more about what to expect during assessments or how results can help you?",
    ("intervention", Role.TEACHER):
        "I can help you implement specific interventions or set up progress monitoring systems.",
    ("intervention", Role.PARENT):
        "Would you like suggestions for supporting interventions at home?",
    ("intervention", Role.PROFESSIONAL):
        "I can discuss intervention fidelity, progress monitoring, or evidence-based practice selection.",
    ("intervention", Role.STUDENT):
        "Would you like to explore specific strategies that might help with your learning goals?",
}

GENERIC_FOLLOW_UP = "Is there anything specific you'd like to explore further?"

SUGGESTION_SEPARATOR = "\n\n"


def default_response(role: Optional[RoleLike]) -> str:
    """Canned reply for when nothing in the knowledge base matches."""
    parsed = Role.parse(role)
    if parsed is None:
        return GENERIC_DEFAULT_RESPONSE
    return DEFAULT_RESPONSES[parsed]


def follow_up_suggestion(category: str, role: Optional[RoleLike]) -> str:
    """Follow-up prompt for a category and role, or the generic prompt."""
    parsed = Role.parse(role)
    if parsed is None:
        return GENERIC_FOLLOW_UP
    return FOLLOW_UP_SUGGESTIONS.get((category, parsed), GENERIC_FOLLOW_UP)


@dataclass
class ComposedResponse:
    """Response text plus the entry it was drawn from."""
    text: str
    entry: Optional[KnowledgeEntry] = None
    follow_up: Optional[str] = None

    @property
    def topic(self) -> Optional[str]:
        """Category surfaced by this response, if any."""
        return self.entry.category if self.entry else None


class ResponseComposer:
    """Builds role-appropriate answers from retrieved knowledge."""

    def __init__(
        self,
        retriever: KnowledgeRetriever,
        top_n: int = 3,
        follow_up_enabled: bool = True
    ):
        """
        Initialize composer.

        Args:
            retriever: Retriever used to find candidate entries
            top_n: How many entries to request from the retriever
            follow_up_enabled: Append a follow-up prompt on the first topic of a session
        """
        self.retriever = retriever
        self.top_n = top_n
        self.follow_up_enabled = follow_up_enabled

    def compose(self, query: str, context: ConversationContext) -> ComposedResponse:
        """
        Compose the answer to a query, keeping the entry it came from.

        Args:
            query: Free-text query
            context: Conversation context for this call

        Returns:
            ComposedResponse with the text and primary entry (None on fallback)
        """
        entries = self.retriever.find_relevant_entries(query, context.role, self.top_n)

        if not entries:
            logger.debug(f"No knowledge matched {query[:50]!r}; using default response")
            return ComposedResponse(text=default_response(context.role))

        primary = entries[0]
        text = primary.text_for(context.role)

        follow_up = None
        if self.follow_up_enabled and context.is_first_turn:
            follow_up = follow_up_suggestion(primary.category, context.role)
            text += SUGGESTION_SEPARATOR + follow_up

        logger.debug(f"Composed response from entry {primary.id} ({primary.category})")
        return ComposedResponse(text=text, entry=primary, follow_up=follow_up)

    def generate_response(self, query: str, context: ConversationContext) -> str:
        """Compose the answer to a query and return only its text."""
        return self.compose(query, context).text
