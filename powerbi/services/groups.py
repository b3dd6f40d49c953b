from httpx import URL, AsyncClient

from framework.core.handles import decode, release
from powerbi.handles import (
    PowerBIAddGroupUserEndpoint,
    PowerBICreateGroupEndpoint,
    PowerBIDeleteGroupEndpoint,
    PowerBIDeleteGroupUserEndpoint,
    PowerBIGetGroupEndpoint,
    PowerBIListGroupsEndpoint,
    PowerBIListGroupUsersEndpoint,
    PowerBIUpdateGroupEndpoint,
    PowerBIUpdateGroupUserEndpoint,
)
from powerbi.types import (
    CreateGroupOptions,
    CreateGroupRequest,
    DeleteGroupUserOptions,
    Group,
    GroupUser,
    ListGroupsOptions,
    ListGroupUsersOptions,
    UpdateGroupRequest,
    ValueList,
)

from .base import Service


class GroupsService(Service):
    """Workspaces the caller has access to, and their users."""

    def __init__(self, base_url: URL | str, client: AsyncClient) -> None:
        super().__init__(base_url, client)
        self.create_endpoint = self._endpoint(PowerBICreateGroupEndpoint)
        self.delete_endpoint = self._endpoint(PowerBIDeleteGroupEndpoint)
        self.get_endpoint = self._endpoint(PowerBIGetGroupEndpoint)
        self.list_endpoint = self._endpoint(PowerBIListGroupsEndpoint)
        self.update_endpoint = self._endpoint(PowerBIUpdateGroupEndpoint)
        self.add_user_endpoint = self._endpoint(PowerBIAddGroupUserEndpoint)
        self.delete_user_endpoint = self._endpoint(PowerBIDeleteGroupUserEndpoint)
        self.list_users_endpoint = self._endpoint(PowerBIListGroupUsersEndpoint)
        self.update_user_endpoint = self._endpoint(PowerBIUpdateGroupUserEndpoint)

    async def create(self, request: CreateGroupRequest, options: CreateGroupOptions | None = None) -> Group:
        response = await self.create_endpoint.handle(options=options, body=request)
        return await decode(response, Group)

    async def delete(self, group_id: str) -> None:
        response = await self.delete_endpoint.handle(path_args={"groupId": group_id})
        await release(response)

    async def get(self, group_id: str) -> Group:
        response = await self.get_endpoint.handle(path_args={"groupId": group_id})
        return await decode(response, Group)

    async def update(self, group_id: str, request: UpdateGroupRequest) -> Group:
        response = await self.update_endpoint.handle(path_args={"groupId": group_id}, body=request)
        return await decode(response, Group)

    async def add_user(self, group_id: str, user: GroupUser) -> None:
        """Grant a user the given access right to the workspace."""
        response = await self.add_user_endpoint.handle(path_args={"groupId": group_id}, body=user)
        await release(response)

    async def delete_user(self, group_id: str, user: str, options: DeleteGroupUserOptions | None = None) -> None:
        """`user` is an email address, or the object ID of a service principal or security group."""
        response = await self.delete_user_endpoint.handle(
            path_args={"groupId": group_id, "user": user},
            options=options,
        )
        await release(response)

    async def list_users(self, group_id: str, options: ListGroupUsersOptions | None = None) -> list[GroupUser]:
        response = await self.list_users_endpoint.handle(path_args={"groupId": group_id}, options=options)
        return (await decode(response, ValueList[GroupUser])).value

    async def update_user(self, group_id: str, user: GroupUser) -> None:
        response = await self.update_user_endpoint.handle(path_args={"groupId": group_id}, body=user)
        await release(response)

    # Must stay last: it shadows the builtin `list` for the rest of the class body.
    async def list(self, options: ListGroupsOptions | None = None) -> list[Group]:
        response = await self.list_endpoint.handle(options=options)
        return (await decode(response, ValueList[Group])).value
