from app.schemas.symptoms import TriageResult


def confidence_label(score: float) -> str:
    if score >= 0.75:
        return "high"
    elif score >= 0.5:
        return "moderate"
    else:
        return "low"


def format_triage_message(result: TriageResult) -> str:
    top = result.possible_conditions[0]
    label = confidence_label(top.confidence)

    message = (
        f"Based on the symptoms you described, your animal may be experiencing "
        f"**{top.name}**.\n\n"
        f"{top.description}\n\n"
        f"This assessment has a **{label} level of confidence ({top.confidence:.0%})** "
        f"and **{result.urgency.value}** urgency."
    )

    others = [c.name for c in result.possible_conditions[1:]]
    if others:
        message += "\n\nOther possibilities: " + ", ".join(others) + "."

    message += "\n\n" + result.general_advice
    return message

