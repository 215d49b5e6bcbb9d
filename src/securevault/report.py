from typing import Dict

from .password_strength import (
    calculate_password_strength,
    get_password_feedback,
    is_password_strong,
    validate_password,
)


def build_report(password: str) -> Dict:
    """Combine score, feedback, gate and validation into one JSON-ready dict"""
    return {
        'strength': calculate_password_strength(password).to_dict(),
        'feedback': get_password_feedback(password),
        'strong_enough': is_password_strong(password),
        'validation': validate_password(password).to_dict(),
    }
