"""Timing and content constants for the Memory Trail exhibit."""

SCAN_DELAY_MS: int = 2000
COUNTDOWN_START: int = 10
COUNTDOWN_TICK_MS: int = 1000

# Raise on store/controller desync instead of degrading to a no-op.
STRICT_SESSION_CHECKS: bool = False

SESSION_TOKEN_PREFIX: str = "sess_"

SCHOOLS: tuple[str, ...] = (
    "School of ICT",
    "School of Business & Accountancy",
    "School of Design & Environment",
    "School of Engineering",
    "School of Health Sciences",
    "School of Humanities & Social Sciences",
    "School of Life Sciences & Chemical Technology",
)

QUIZ_TOPIC: str = "NP History"
QUIZ_QUESTION: str = "In what year was Ngee Ann Polytechnic established?"
QUIZ_OPTIONS: tuple[str, ...] = ("1963", "1968", "1982", "1975")
QUIZ_CORRECT_ANSWER: str = "1963"
QUIZ_EXPLANATION_CORRECT: str = (
    "That's right! NP was founded in 1963 as Ngee Ann College, making it one of "
    "Singapore's pioneer polytechnics. It was named after philanthropist Ngee Ann Kongsi."
)
QUIZ_EXPLANATION_INCORRECT: str = (
    "The correct answer is 1963! NP was founded as Ngee Ann College, named after the "
    "philanthropist Ngee Ann Kongsi. It later became Ngee Ann Technical College before "
    "becoming a polytechnic in 1982."
)

REWARD_TITLE: str = "Memory Photobooth"
REWARD_STATUS: str = "Unlocked!"
REWARD_BADGE: str = "History Explorer"
