"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Angle Practice"
WINDOW_MIN_WIDTH: int = 960
WINDOW_MIN_HEIGHT: int = 720

ANGLE_CANVAS_SIZE: int = 200
ANGLE_PEN_WIDTH: int = 3
ANSWER_SLOT_LABELS: tuple[str, ...] = ("Smallest", "2nd Smallest", "2nd Largest", "Largest")

HOME_TITLE: str = "Master Angle Ranking"
HOME_DESCRIPTION: str = (
    "Practice realistic angle ranking questions. 15 questions in 10 minutes: "
    "rank each set of four angles from smallest to largest."
)
HOME_START_BUTTON: str = "Start New Test"
HOME_HISTORY_TITLE: str = "Recent Tests"
HOME_HISTORY_EMPTY: str = "No completed tests yet."
HOME_HISTORY_ROW_TEMPLATE: str = "{started}  {score}/{total} ({level}) in {duration}"
HOME_CLEAR_HISTORY_BUTTON: str = "Clear History"

RECOVERY_TITLE: str = "Resume test?"
RECOVERY_MESSAGE: str = (
    "An unfinished test from {started} was found. Resume it? "
    "It restarts at question 1 with your recorded answers kept."
)

TEST_INSTRUCTIONS: str = "Rank the angles from smallest to largest"
TEST_CLEAR_BUTTON: str = "Clear Selections"
TEST_NEXT_BUTTON: str = "Next Question"
TEST_FINISH_BUTTON: str = "Finish Test"
TEST_SUBMIT_BUTTON: str = "Submit Test"
TEST_QUESTION_TEMPLATE: str = "Question {current} of {total}"
TEST_TIME_LOW_SUFFIX: str = "  TIME LOW!"
SUBMIT_CONFIRM_TITLE: str = "Submit test"
SUBMIT_CONFIRM_MESSAGE: str = "Submit the test now? Unanswered questions are scored as incorrect."

RESULTS_TITLE: str = "Test Complete!"
RESULTS_SCORE_TEMPLATE: str = "{score}/{total}"
RESULTS_PERCENT_TEMPLATE: str = "{percentage}% Correct"
RESULTS_TIME_TEMPLATE: str = "Completion time: {time}"
RESULTS_REVIEW_ROW_TEMPLATE: str = "Q{question_id}: {mark}  your order {user}  |  correct {correct}"
RESULTS_NEW_TEST_BUTTON: str = "Take New Test"
RESULTS_HOME_BUTTON: str = "Back to Home"

STORAGE_SAVE_FAILED_MESSAGE: str = (
    "Your result could not be saved to history. Scores for this attempt are still shown."
)
