import pytest

FORMAL_TEXT = (
    "Furthermore, the proposed framework delivers measurable value for modern organizations. "
    "Moreover, the proposed framework reduces operational cost across complex environments. "
    "In conclusion, the proposed framework represents a significant strategic advancement. "
    "Studies have shown that structured adoption improves long term business outcomes. "
    "Studies have shown that careful planning increases overall implementation success rates. "
    "In conclusion, studies have shown consistent improvements across many different sectors. "
    "It is important to note that governance remains a critical success factor. "
    "In summary, research indicates that disciplined execution produces reliable results."
)

CONVERSATIONAL_TEXT = (
    "Honestly, I think you know this already. "
    "When I first tried it, I was kinda lost (trust me on that). "
    "But here's the thing: you can totally figure it out! "
    "Do you really need a fancy tool? I mean, not really. "
    "My experience says we should just start, so let's go."
)


@pytest.fixture
def formal_text() -> str:
    return FORMAL_TEXT


@pytest.fixture
def conversational_text() -> str:
    return CONVERSATIONAL_TEXT
