"""Static metadata describing Angle Practice."""

APP_NAME = "Angle Practice"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "Angle Practice is a desktop trainer for angle-ranking questions built with Qt. "
    "Each test has 15 questions of 4 angles to rank from smallest to largest in 10 minutes."
)

HELP_TEXT = (
    "Click the angles in order from smallest to largest. The answer slots fill as you click.\n\n"
    "Click an angle you already picked to undo it and everything picked after it, "
    "or use Clear Selections to start the question over.\n\n"
    "Next Question becomes available once all four slots are filled. Submit Test ends the "
    "attempt early; any partial ranking on the current question is kept but scored as incorrect.\n\n"
    "The test is submitted automatically when the timer reaches 00:00. An interrupted test can be "
    "resumed from the home screen; it restarts at question 1 with your recorded answers kept."
)
