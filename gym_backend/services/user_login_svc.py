from __future__ import annotations

import logging
from typing import Any, Mapping

from ..repository import user_login_repo
from .entity_svc import EntityService

logger = logging.getLogger(__name__)


class UserLoginService(EntityService):
    def __init__(self):
        super().__init__(user_login_repo.repo, "USER_LOGINS_LIST", "userLogins", "userLogin")

    def track(self, data: Mapping[str, Any]) -> bool:
        """Record one login attempt; failure to record never blocks the login itself."""
        row = {k: v for k, v in data.items() if v is not None}
        res = self.repo.insert(row)
        if not res.status:
            logger.warning("login tracking failed for %s: %s", row.get("email"), res.message)
            return False
        self.invalidate()
        return True


user_login_service = UserLoginService()
