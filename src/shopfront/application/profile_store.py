"""Application service: Profile Store (edit-in-place user details)."""

from __future__ import annotations

import logging

from shopfront.application.observable import Observable
from shopfront.domain.model.profile import DEMO_PROFILE, UserProfile

logger = logging.getLogger(__name__)


class ProfileStore(Observable):

    def __init__(self, profile: UserProfile = DEMO_PROFILE) -> None:
        super().__init__()
        self.profile = profile
        self.is_editing = False

    def begin_edit(self) -> None:
        self.is_editing = True
        self._notify()

    def cancel_edit(self) -> None:
        self.is_editing = False
        self._notify()

    def update(self, profile: UserProfile) -> UserProfile:
        """Replace the profile and leave edit mode.

        Raises ValidationError (and stays in edit mode) on invalid input.
        """
        self.profile = profile.validate()
        self.is_editing = False
        logger.debug("Profile updated for %s", self.profile.email)
        self._notify()
        return self.profile
