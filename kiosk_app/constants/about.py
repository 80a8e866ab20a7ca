"""Static metadata and notices for the Memory Trail kiosk."""

APP_NAME = "NP Memory Trail"
APP_VERSION = "0.1"
APP_TAGLINE = "Discover the rich history of Ngee Ann Polytechnic"

PRIVACY_TITLE = "Your Privacy Matters"
PRIVACY_TEXT = (
    "We don't collect personal data. This kiosk uses data minimisation principles:\n\n"
    "• No names, student IDs, or identifiable information is stored\n"
    "• Only your selected school and quiz answers are temporarily held in memory\n"
    "• A random session token is created for your visit (not linked to your identity)\n"
    "• All data is automatically cleared when your session ends\n"
    "• Nothing is saved to any database or sent to any server\n\n"
    "This exhibit follows NP's commitment to responsible data practices."
)
