"""Package‑wide constants: draw ranges, labels and feedback text."""

# Starting equation for explore mode: 2x + 1 = -x + 4 (crosses at (1, 3))
DEFAULT_COEFFICIENTS: dict[str, int] = {"a": 2, "b": 1, "c": -1, "d": 4}

# Graph axis half-range (settings slider: 5..50, step 5)
DEFAULT_HALF_RANGE = 10
MIN_HALF_RANGE = 5
MAX_HALF_RANGE = 50
HALF_RANGE_STEP = 5
# Samples extend past the visible axis so lines are not clipped at the edge
SAMPLE_MARGIN = 2

# Quiz draws (inclusive bounds)
QUIZ_SLOPE_RANGE = (-4, 3)
QUIZ_INTERCEPT_RANGE = (-5, 4)
QUIZ_SLOPE_GAP_RANGE = (1, 3)
TOTAL_QUESTIONS = 10
GREAT_SCORE = 7

# Challenge starting draws (inclusive bounds)
CHALLENGE_SLOPE_RANGE = (-5, 4)
CHALLENGE_INTERCEPT_RANGE = (-10, 9)

# Upper bound on rejection-sampling redraws
MAX_REDRAWS = 1000

CORRECT_MESSAGE = "Correct! You're getting it!"
GRAPH_HINT = "Look closely at the lines. Do they cross, never touch, or overlap?"
SYMBOLIC_HINT = "Not quite. Look closely at the variable terms ({a}x and {c}x)."

SCORE_MESSAGES: dict[str, str] = {
    "perfect": "Perfect Score! You are a master!",
    "great": "Great job! You really know your stuff.",
    "keep": "Keep practicing! You'll get it.",
}

LEFT_COLOR = "#ef4444"
RIGHT_COLOR = "#3b82f6"

COEFFICIENT_LABELS: dict[str, str] = {
    "a": "Left Slope (m)",
    "b": "Left Intercept (b)",
    "c": "Right Slope (m)",
    "d": "Right Intercept (b)",
}


__all__ = [
    "DEFAULT_COEFFICIENTS",
    "DEFAULT_HALF_RANGE",
    "MIN_HALF_RANGE",
    "MAX_HALF_RANGE",
    "HALF_RANGE_STEP",
    "SAMPLE_MARGIN",
    "QUIZ_SLOPE_RANGE",
    "QUIZ_INTERCEPT_RANGE",
    "QUIZ_SLOPE_GAP_RANGE",
    "TOTAL_QUESTIONS",
    "GREAT_SCORE",
    "CHALLENGE_SLOPE_RANGE",
    "CHALLENGE_INTERCEPT_RANGE",
    "MAX_REDRAWS",
    "CORRECT_MESSAGE",
    "GRAPH_HINT",
    "SYMBOLIC_HINT",
    "SCORE_MESSAGES",
    "LEFT_COLOR",
    "RIGHT_COLOR",
    "COEFFICIENT_LABELS",
]
