"""Qt UI constants used across kiosk panels."""

WINDOW_TITLE: str = "NP Memory Trail"
KIOSK_FULLSCREEN: bool = True

IDLE_BEGIN_BUTTON: str = "Tap Your NP Card to Begin"
IDLE_PRIVACY_LINE: str = "No personal data will be stored"

SCAN_TITLE: str = "Reading Card..."
SCAN_PRIVACY_LINE: str = "No personal data stored"

WELCOME_TITLE: str = "Welcome!"
WELCOME_PROMPT: str = "Select your school to personalize your experience:"
WELCOME_PLACEHOLDER: str = "Choose your school..."
WELCOME_CONTINUE_BUTTON: str = "Start the Quiz"

QUIZ_PROGRESS_TEMPLATE: str = "Question {number} of {total}"
QUIZ_SUBMIT_BUTTON: str = "Submit Answer"

RESULT_CORRECT_TITLE: str = "Correct!"
RESULT_INCORRECT_TITLE: str = "Not Quite!"
RESULT_CONTINUE_BUTTON: str = "Continue"

REWARD_HEADLINE: str = "Congratulations!"
REWARD_SUBTITLE: str = "You've unlocked a special reward"
REWARD_BADGE_CAPTION: str = "Badge Earned"
REWARD_END_BUTTON: str = "End Session"

END_TITLE: str = "Session Ended"
END_NOTICE: str = (
    "All session data has been securely removed. No information was stored or transmitted."
)
END_COUNTDOWN_TEMPLATE: str = "Returning to start in {seconds} seconds..."

PRIVACY_BUTTON: str = "Privacy Info"
