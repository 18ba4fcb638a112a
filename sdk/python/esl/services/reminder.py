# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 ESL SDK Authors

"""Signer reminder schedules."""

from typing import Optional

from .. import api
from ..mapping import from_api_reminder_schedule, to_api_reminder_schedule
from ..models import PackageId, ReminderSchedule
from .base import Service


class ReminderService(Service):

    def create_reminder_schedule(self, schedule: ReminderSchedule) -> ReminderSchedule:
        data = self.client.post(
            self.url("/packages/{packageId}/reminders", packageId=schedule.package_id),
            to_api_reminder_schedule(schedule),
        )
        return self._parse(data) or schedule

    def update_reminder_schedule(self, schedule: ReminderSchedule) -> ReminderSchedule:
        data = self.client.put(
            self.url("/packages/{packageId}/reminders", packageId=schedule.package_id),
            to_api_reminder_schedule(schedule),
        )
        return self._parse(data) or schedule

    def get_reminder_schedule(self, package_id: PackageId) -> Optional[ReminderSchedule]:
        """The package's reminder schedule, or None if it has none."""
        data = self.client.get(self.url("/packages/{packageId}/reminders", packageId=package_id))
        return self._parse(data)

    def clear_reminder_schedule(self, package_id: PackageId) -> None:
        self.client.delete(self.url("/packages/{packageId}/reminders", packageId=package_id))

    @staticmethod
    def _parse(data) -> Optional[ReminderSchedule]:
        if not data:
            return None
        return from_api_reminder_schedule(api.ReminderSchedule.from_dict(data))
