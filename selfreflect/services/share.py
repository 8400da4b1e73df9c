from .entry_store import Draft

SHARE_TITLE = "My Self-Reflection"


def compose_share_text(draft: Draft) -> str:
    return (
        f"My Reflection for {draft.date}:\n\n"
        f"Past: {draft.past}\n"
        f"Future: {draft.future}\n"
        f"Mood: {draft.mood_label} ({draft.mood}/10)"
    )
