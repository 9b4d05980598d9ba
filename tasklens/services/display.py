"""Text shown next to metrics and streaks."""

# (minimum streak, emoji), highest first
STREAK_TIERS: list[tuple[int, str]] = [
    (30, "🏆"),
    (21, "💎"),
    (14, "🔥"),
    (7, "⭐"),
    (3, "🌟"),
    (0, "✨"),
]


def format_minutes(minutes: int) -> str:
    """``95`` -> ``"1h 35m"``, ``40`` -> ``"40m"``."""
    hours, mins = divmod(max(0, int(minutes)), 60)
    if hours == 0:
        return f"{mins}m"
    return f"{hours}h {mins}m"


def streak_emoji(streak: int) -> str:
    for threshold, emoji in STREAK_TIERS:
        if streak >= threshold:
            return emoji
    return STREAK_TIERS[-1][1]


def streak_message(streak: int) -> str:
    if streak <= 0:
        return "Every expert was once a beginner. Start your streak today!"
    if streak == 1:
        return "Great start! One day down, many more to go!"
    if streak < 7:
        return f"{streak} days strong! You're building momentum!"
    if streak < 14:
        return f"Impressive {streak}-day streak! You're on fire! 🔥"
    if streak < 30:
        return f"Amazing {streak}-day streak! You're unstoppable!"
    return f"Legendary {streak}-day streak! You're a productivity master! 🏆"
