import logging
import re
from typing import Tuple

from .password_strength import calculate_password_strength, is_password_strong

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')


class SignupChecker:
    def validate_email(self, email: str) -> bool:
        """Validate email format"""
        if not email:
            return False
        return bool(EMAIL_PATTERN.match(email))

    def passwords_match(self, password: str, confirm_password: str) -> bool:
        """True only when both fields are filled in and identical"""
        return bool(password) and bool(confirm_password) and password == confirm_password

    def check(self, email: str, password: str, confirm_password: str) -> Tuple[bool, str]:
        """Check a signup form before an account is created"""
        if not email or not password or not confirm_password:
            return False, "Please fill in all fields"

        if not self.validate_email(email):
            return False, "Please enter a valid email address"

        if password != confirm_password:
            return False, "Passwords do not match"

        if not is_password_strong(password):
            strength = calculate_password_strength(password)
            logger.debug("Rejected signup password for %s: level=%s length=%s",
                         email, strength.level, len(password))
            return False, "Please use a stronger password"

        return True, "Password accepted"
