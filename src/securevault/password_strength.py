"""Password strength scoring, feedback and validation helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

MIN_LENGTH = 8
BONUS_LENGTHS = (12, 16)
POINTS_PER_CRITERION = 20
BONUS_POINTS = 10
MAX_SCORE = 100

UPPERCASE = frozenset('ABCDEFGHIJKLMNOPQRSTUVWXYZ')
LOWERCASE = frozenset('abcdefghijklmnopqrstuvwxyz')
DIGITS = frozenset('0123456789')
SPECIAL_CHARACTERS = frozenset('!@#$%^&*(),.?":{}|<>')

# (upper bound exclusive, level, label, color), checked in order
TIERS = (
    (40, 1, 'Weak', 'bg-red-500'),
    (70, 2, 'Medium', 'bg-orange-500'),
    (90, 3, 'Good', 'bg-yellow-500'),
    (None, 4, 'Strong', 'bg-green-500'),
)
STRONG_ENOUGH_LEVEL = 3

EMPTY_FEEDBACK = 'Enter a password to see strength'
STRONG_FEEDBACK = '✓ Strong password!'
REQUIRED_ERROR = 'Password is required'


@dataclass(frozen=True)
class StrengthAssessment:
    """Graded strength of a single password."""

    level: int
    percentage: int
    label: str
    color: str

    def to_dict(self) -> Dict:
        return {
            'level': self.level,
            'percentage': self.percentage,
            'label': self.label,
            'color': self.color,
        }


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    errors: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict:
        return {'valid': self.valid, 'errors': list(self.errors)}


NO_PASSWORD = StrengthAssessment(level=0, percentage=0, label='None', color='bg-neutral-200')


def _contains_any(password: str, charset: frozenset) -> bool:
    return any(char in charset for char in password)


def check_criteria(password: str) -> Dict[str, bool]:
    """Evaluate the five content criteria, in their fixed order."""
    return {
        'length': len(password) >= MIN_LENGTH,
        'uppercase': _contains_any(password, UPPERCASE),
        'lowercase': _contains_any(password, LOWERCASE),
        'number': _contains_any(password, DIGITS),
        'special': _contains_any(password, SPECIAL_CHARACTERS),
    }


def tier_for_percentage(percentage: int) -> StrengthAssessment:
    """Map a 0-100 score onto its tier."""
    for upper, level, label, color in TIERS:
        if upper is None or percentage < upper:
            break
    return StrengthAssessment(level=level, percentage=percentage, label=label, color=color)


def calculate_password_strength(password: str) -> StrengthAssessment:
    """Score a password from 0 to 100 and classify it.

    Every satisfied criterion is worth 20 points. Passwords of 12 and 16
    characters or more earn 10 extra points each, so length alone can lift
    a password with few character classes into a higher tier. The total is
    capped at 100.
    """
    if not password:
        return NO_PASSWORD

    checks = check_criteria(password)
    score = POINTS_PER_CRITERION * sum(checks.values())

    for threshold in BONUS_LENGTHS:
        if len(password) >= threshold:
            score += BONUS_POINTS

    return tier_for_percentage(min(score, MAX_SCORE))


def get_password_feedback(password: str) -> List[str]:
    """Return one suggestion per unmet criterion."""
    if not password:
        return [EMPTY_FEEDBACK]

    feedback = []
    if len(password) < MIN_LENGTH:
        feedback.append('Use at least 8 characters')
    if not _contains_any(password, UPPERCASE):
        feedback.append('Add uppercase letters (A-Z)')
    if not _contains_any(password, LOWERCASE):
        feedback.append('Add lowercase letters (a-z)')
    if not _contains_any(password, DIGITS):
        feedback.append('Add numbers (0-9)')
    if not _contains_any(password, SPECIAL_CHARACTERS):
        feedback.append('Add special characters (!@#$%^&*)')

    if not feedback:
        feedback.append(STRONG_FEEDBACK)
    return feedback


def is_password_strong(password: str) -> bool:
    """Admission gate for new credentials: Good or Strong only."""
    return calculate_password_strength(password).level >= STRONG_ENOUGH_LEVEL


def validate_password(password: str) -> ValidationResult:
    """List every hard requirement the password misses."""
    if not password:
        return ValidationResult(valid=False, errors=(REQUIRED_ERROR,))

    errors = []
    if len(password) < MIN_LENGTH:
        errors.append('Password must be at least 8 characters')
    if not _contains_any(password, UPPERCASE):
        errors.append('Password must contain at least one uppercase letter')
    if not _contains_any(password, LOWERCASE):
        errors.append('Password must contain at least one lowercase letter')
    if not _contains_any(password, DIGITS):
        errors.append('Password must contain at least one number')
    if not _contains_any(password, SPECIAL_CHARACTERS):
        errors.append('Password must contain at least one special character')

    return ValidationResult(valid=not errors, errors=tuple(errors))
