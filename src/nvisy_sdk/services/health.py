"""Health API service."""

from __future__ import annotations

from ..http import HttpCore
from ..models import CheckHealth, MonitorStatus


class HealthService(HttpCore):
    async def health(self, options: CheckHealth | None = None) -> MonitorStatus:
        """Return the current system health.

        Without options this is a plain GET; with options the check
        parameters are POSTed as the request body.
        """
        if options is None:
            request = self.build_request("GET", "/health/")
        else:
            request = self.build_request("POST", "/health/", json=options.to_payload())
        return await self.send_json(request, MonitorStatus)
