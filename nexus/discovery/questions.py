"""Discovery interview steps and their quick-pick tags"""

from pydantic import BaseModel, ConfigDict


class QuickPick(BaseModel):
    model_config = ConfigDict(frozen=True)

    tag: str
    label: str
    desc: str


class DiscoveryQuestion(BaseModel):
    """One step of the interview; picks on a negative step are dealbreakers"""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    question: str
    category: str
    quick_picks: tuple[QuickPick, ...]
    is_negative: bool = False


def _picks(*rows: tuple[str, str, str]) -> tuple[QuickPick, ...]:
    return tuple(QuickPick(tag=tag, label=label, desc=desc) for tag, label, desc in rows)


QUESTIONS: tuple[DiscoveryQuestion, ...] = (
    DiscoveryQuestion(
        id="attraction",
        title="Initial Attraction",
        question="What catches your attention first?",
        category="arousal_pattern",
        quick_picks=_picks(
            ("Sapiosexual", "Intelligence", "Mind turns you on"),
            ("Visual Arousal", "Physical", "Appearance matters"),
            ("Demisexual", "Need time", "Bond first"),
            ("Voice Arousal", "Voice", "How they sound"),
            ("Scent-Based Arousal", "Scent", "Their smell"),
            ("Touch-Focused", "Touch", "Physical contact"),
        ),
    ),
    DiscoveryQuestion(
        id="communication",
        title="Communication",
        question="How do you prefer to connect?",
        category="communication_style",
        quick_picks=_picks(
            ("Asynchronous Preference", "Text/Async", "Think first"),
            ("Voice/Call Preference", "Voice/Calls", "Real-time"),
            ("Deep Conversation Seeker", "Deep talks", "Meaningful"),
            ("Direct Communicator", "Direct", "Say it plain"),
            ("Words of Affirmation", "Affirming", "Verbal love"),
            ("Active Listener", "Listener", "Hear them out"),
        ),
    ),
    DiscoveryQuestion(
        id="relationship",
        title="Relationship Style",
        question="What structure(s) interest you?",
        category="relationship_structure",
        quick_picks=_picks(
            ("Monogamy", "Monogamy", "One partner"),
            ("Open Relationship", "Open", "Primary + others"),
            ("Polyamory", "Polyamory", "Multiple loves"),
            ("Casual Dating", "Casual", "No commitment"),
            ("Friends With Benefits", "FWB", "Friends + fun"),
            ("Long-Distance Capable", "LDR OK", "Can do distance"),
        ),
    ),
    DiscoveryQuestion(
        id="connection",
        title="Connection",
        question="What makes you feel truly connected?",
        category="emotional_connection",
        quick_picks=_picks(
            ("Quality Time Priority", "Quality time", "Being together"),
            ("Physical Touch Priority", "Touch", "Closeness"),
            ("Acts of Service", "Acts of service", "Doing things"),
            ("Gift Giving/Receiving", "Gifts", "Thoughtful tokens"),
            ("Collaborative Growth", "Growing together", "Evolve as one"),
            ("Authentic Over Performative", "Authenticity", "Real over fake"),
        ),
    ),
    DiscoveryQuestion(
        id="lifestyle",
        title="Lifestyle",
        question="What lifestyle elements matter?",
        category="lifestyle_values",
        quick_picks=_picks(
            ("Child-Free", "Child-free", "No kids"),
            ("Family-Oriented", "Family", "Kids matter"),
            ("Career-Focused", "Career", "Work priority"),
            ("Adventure Seeker", "Adventure", "Excitement"),
            ("Homebody", "Homebody", "Stay in"),
            ("Spiritually Open", "Spiritual", "Open minded"),
        ),
    ),
    DiscoveryQuestion(
        id="boundaries",
        title="Dealbreakers",
        question="What are you NOT looking for?",
        category="boundaries",
        is_negative=True,
        quick_picks=_picks(
            ("No Drama", "Drama", "Constant conflict"),
            ("No Ghosting", "Ghosting", "Disappearing"),
            ("No Pressure", "Pressure", "Being rushed"),
            ("Monogamy Required", "Non-monogamy", "Need exclusive"),
            ("No Long Distance", "Long distance", "Need proximity"),
            ("No Casual", "Casual only", "Want serious"),
        ),
    ),
)


def get_question(question_id: str) -> DiscoveryQuestion:
    for question in QUESTIONS:
        if question.id == question_id:
            return question
    raise KeyError(f"Unknown discovery question: {question_id}")
