# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 ESL SDK Authors

"""Signer groups."""

import logging
from typing import List

from .. import api
from ..mapping import from_api_group, to_api_group, to_api_group_member
from ..models import Group, GroupMember
from .base import Service

logger = logging.getLogger(__name__)


class GroupService(Service):

    def get_my_groups(self) -> List[Group]:
        data = self.client.get(self.url("/groups")) or {}
        return [from_api_group(api.Group.from_dict(g)) for g in data.get("results", [])]

    def get_group(self, group_id: str) -> Group:
        data = self.client.get(self.url("/groups/{groupId}", groupId=group_id))
        return from_api_group(api.Group.from_dict(data or {}))

    def create_group(self, group: Group) -> Group:
        data = self.client.post(self.url("/groups"), to_api_group(group))
        created = from_api_group(api.Group.from_dict(data or {}))
        logger.info("Created group %s (%s)", created.id, created.name)
        return created

    def delete_group(self, group_id: str) -> None:
        self.client.delete(self.url("/groups/{groupId}", groupId=group_id))

    def invite_member(self, group_id: str, member: GroupMember) -> GroupMember:
        data = self.client.post(
            self.url("/groups/{groupId}/members", groupId=group_id),
            to_api_group_member(member),
        )
        invited = api.GroupMember.from_dict(data or {})
        return GroupMember(
            email=invited.email or member.email,
            first_name=invited.first_name or member.first_name,
            last_name=invited.last_name or member.last_name,
            member_type=invited.member_type or member.member_type,
        )
