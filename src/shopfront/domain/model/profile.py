"""UserProfile — contact details shown on the profile screen."""

from __future__ import annotations

from dataclasses import dataclass

from shopfront.domain.exceptions import ValidationError


@dataclass(frozen=True)
class UserProfile:
    name: str
    email: str
    phone: str = ""
    address: str = ""

    def validate(self) -> UserProfile:
        """Return a trimmed copy, or raise if a required field is unusable."""
        name = self.name.strip()
        email = self.email.strip()
        if not name:
            raise ValidationError("Name is required")
        if "@" not in email:
            raise ValidationError(f"'{self.email}' is not a valid email address")
        return UserProfile(
            name=name,
            email=email,
            phone=self.phone.strip(),
            address=self.address.strip(),
        )


DEMO_PROFILE = UserProfile(
    name="John Doe",
    email="john@example.com",
    phone="+1 234 567 8900",
    address="123 Main St, City, Country",
)
