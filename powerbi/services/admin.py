from httpx import URL, AsyncClient

from framework.core.handles import decode, release
from powerbi.handles import (
    PowerBIAdminAddGroupUserEndpoint,
    PowerBIAdminDeleteGroupUserEndpoint,
    PowerBIAdminGetGroupEndpoint,
    PowerBIAdminGetUnusedArtifactsEndpoint,
    PowerBIAdminListGroupsEndpoint,
    PowerBIAdminListGroupUsersEndpoint,
    PowerBIAdminRestoreGroupEndpoint,
    PowerBIAdminUpdateGroupEndpoint,
)
from powerbi.types import (
    AdminGroup,
    DeleteUserOptions,
    GroupOptions,
    GroupRestoreRequest,
    GroupsOptions,
    GroupUser,
    UnusedArtifactsOptions,
    UnusedArtifactsResponse,
    ValueList,
)

from .base import Service


class AdminGroupsService(Service):
    """Tenant wide workspace administration. Requires Power BI administrator rights."""

    def __init__(self, base_url: URL | str, client: AsyncClient) -> None:
        super().__init__(base_url, client)
        self.add_user_endpoint = self._endpoint(PowerBIAdminAddGroupUserEndpoint)
        self.delete_user_endpoint = self._endpoint(PowerBIAdminDeleteGroupUserEndpoint)
        self.get_endpoint = self._endpoint(PowerBIAdminGetGroupEndpoint)
        self.list_users_endpoint = self._endpoint(PowerBIAdminListGroupUsersEndpoint)
        self.list_endpoint = self._endpoint(PowerBIAdminListGroupsEndpoint)
        self.unused_artifacts_endpoint = self._endpoint(PowerBIAdminGetUnusedArtifactsEndpoint)
        self.restore_endpoint = self._endpoint(PowerBIAdminRestoreGroupEndpoint)
        self.update_endpoint = self._endpoint(PowerBIAdminUpdateGroupEndpoint)

    async def add_user(self, group_id: str, user: GroupUser) -> None:
        response = await self.add_user_endpoint.handle(path_args={"groupId": group_id}, body=user)
        await release(response)

    async def delete_user(self, group_id: str, user: str, options: DeleteUserOptions | None = None) -> None:
        response = await self.delete_user_endpoint.handle(
            path_args={"groupId": group_id, "user": user},
            options=options,
        )
        await release(response)

    async def get(self, group_id: str, options: GroupOptions | None = None) -> AdminGroup:
        response = await self.get_endpoint.handle(path_args={"groupId": group_id}, options=options)
        return await decode(response, AdminGroup)

    async def list_users(self, group_id: str) -> list[GroupUser]:
        response = await self.list_users_endpoint.handle(path_args={"groupId": group_id})
        return (await decode(response, ValueList[GroupUser])).value

    async def get_unused_artifacts(
        self,
        group_id: str,
        options: UnusedArtifactsOptions | None = None,
    ) -> UnusedArtifactsResponse:
        """
        Artifacts of the workspace not used in the last 30 days.

        The result is paged: pass its `continuation_token` back in the options to get the next page.
        """
        response = await self.unused_artifacts_endpoint.handle(path_args={"groupId": group_id}, options=options)
        return await decode(response, UnusedArtifactsResponse)

    async def restore(self, group_id: str, request: GroupRestoreRequest) -> None:
        response = await self.restore_endpoint.handle(path_args={"groupId": group_id}, body=request)
        await release(response)

    async def update(self, group_id: str, group: AdminGroup) -> None:
        response = await self.update_endpoint.handle(path_args={"groupId": group_id}, body=group)
        await release(response)

    async def list(self, options: GroupsOptions | None = None) -> list[AdminGroup]:
        response = await self.list_endpoint.handle(options=options)
        return (await decode(response, ValueList[AdminGroup])).value


class AdminService:
    def __init__(self, base_url: URL | str, client: AsyncClient) -> None:
        self.groups = AdminGroupsService(base_url, client)
