from http import HTTPMethod

from framework.core.handles import HTTPAPIRequestHandle

# Groups


class PowerBICreateGroupEndpoint(HTTPAPIRequestHandle):
    path = "groups"
    method = HTTPMethod.POST


class PowerBIDeleteGroupEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}"
    method = HTTPMethod.DELETE


class PowerBIGetGroupEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}"
    method = HTTPMethod.GET


class PowerBIListGroupsEndpoint(HTTPAPIRequestHandle):
    path = "groups"
    method = HTTPMethod.GET


class PowerBIUpdateGroupEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}"
    method = HTTPMethod.PATCH


class PowerBIAddGroupUserEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/users"
    method = HTTPMethod.POST


class PowerBIDeleteGroupUserEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/users/{user}"
    method = HTTPMethod.DELETE


class PowerBIListGroupUsersEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/users"
    method = HTTPMethod.GET


class PowerBIUpdateGroupUserEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/users"
    method = HTTPMethod.PUT


# Admin groups


class PowerBIAdminAddGroupUserEndpoint(HTTPAPIRequestHandle):
    path = "admin/groups/{groupId}/users"
    method = HTTPMethod.POST


class PowerBIAdminDeleteGroupUserEndpoint(HTTPAPIRequestHandle):
    path = "admin/groups/{groupId}/users/{user}"
    method = HTTPMethod.DELETE


class PowerBIAdminGetGroupEndpoint(HTTPAPIRequestHandle):
    path = "admin/groups/{groupId}"
    method = HTTPMethod.GET


class PowerBIAdminListGroupUsersEndpoint(HTTPAPIRequestHandle):
    path = "admin/groups/{groupId}/users"
    method = HTTPMethod.GET


class PowerBIAdminListGroupsEndpoint(HTTPAPIRequestHandle):
    path = "admin/groups"
    method = HTTPMethod.GET


class PowerBIAdminGetUnusedArtifactsEndpoint(HTTPAPIRequestHandle):
    path = "admin/groups/{groupId}/unused"
    method = HTTPMethod.GET


class PowerBIAdminRestoreGroupEndpoint(HTTPAPIRequestHandle):
    path = "admin/groups/{groupId}/restore"
    method = HTTPMethod.POST


class PowerBIAdminUpdateGroupEndpoint(HTTPAPIRequestHandle):
    path = "admin/groups/{groupId}"
    method = HTTPMethod.PATCH


# Datasets in a workspace


class PowerBIBindDatasetToGatewayEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/datasets/{datasetId}/Default.BindToGateway"
    method = HTTPMethod.POST


class PowerBICancelDatasetRefreshEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/datasets/{datasetId}/refreshes/{refreshId}"
    method = HTTPMethod.DELETE


class PowerBIDeleteDatasetEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/datasets/{datasetId}"
    method = HTTPMethod.DELETE


class PowerBIDiscoverDatasetGatewaysEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/datasets/{datasetId}/Default.DiscoverGateways"
    method = HTTPMethod.GET


class PowerBIExecuteDatasetQueriesEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/datasets/{datasetId}/executeQueries"
    method = HTTPMethod.POST


class PowerBIGetDatasetEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/datasets/{datasetId}"
    method = HTTPMethod.GET


class PowerBIListUpstreamDataflowsEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/datasets/upstreamDataflows"
    method = HTTPMethod.GET


class PowerBIListDatasetUsersEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/datasets/{datasetId}/users"
    method = HTTPMethod.GET


class PowerBIListDatasetsEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/datasets"
    method = HTTPMethod.GET


class PowerBIListDatasourcesEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/datasets/{datasetId}/datasources"
    method = HTTPMethod.GET


class PowerBIGetDirectQueryRefreshScheduleEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/datasets/{datasetId}/directQueryRefreshSchedule"
    method = HTTPMethod.GET


class PowerBIListGatewayDatasourcesEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/datasets/{datasetId}/Default.GetBoundGatewayDatasources"
    method = HTTPMethod.GET


class PowerBIListDatasetParametersEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/datasets/{datasetId}/parameters"
    method = HTTPMethod.GET


class PowerBIListDatasetRefreshEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/datasets/{datasetId}/refreshes"
    method = HTTPMethod.GET


class PowerBIRefreshDatasetEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/datasets/{datasetId}/refreshes"
    method = HTTPMethod.POST


# Dashboards (My workspace)


class PowerBIAddDashboardEndpoint(HTTPAPIRequestHandle):
    path = "dashboards"
    method = HTTPMethod.POST


class PowerBICloneTileEndpoint(HTTPAPIRequestHandle):
    path = "dashboards/{dashboardId}/tiles/{tileId}/Clone"
    method = HTTPMethod.POST


class PowerBIDeleteDashboardEndpoint(HTTPAPIRequestHandle):
    path = "dashboards/{dashboardId}"
    method = HTTPMethod.DELETE


class PowerBIGetDashboardEndpoint(HTTPAPIRequestHandle):
    path = "dashboards/{dashboardId}"
    method = HTTPMethod.GET


class PowerBIListDashboardsEndpoint(HTTPAPIRequestHandle):
    path = "dashboards"
    method = HTTPMethod.GET


class PowerBIGetTileEndpoint(HTTPAPIRequestHandle):
    path = "dashboards/{dashboardId}/tiles/{tileId}"
    method = HTTPMethod.GET


class PowerBIListTilesEndpoint(HTTPAPIRequestHandle):
    path = "dashboards/{dashboardId}/tiles"
    method = HTTPMethod.GET


# Embed tokens


class PowerBIGenerateTokenEndpoint(HTTPAPIRequestHandle):
    path = "GenerateToken"
    method = HTTPMethod.POST


class PowerBIGenerateDashboardTokenEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/dashboards/{dashboardId}/GenerateToken"
    method = HTTPMethod.POST


class PowerBIGenerateDatasetTokenEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/datasets/{datasetId}/GenerateToken"
    method = HTTPMethod.POST


class PowerBIGenerateReportCreationTokenEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/reports/GenerateToken"
    method = HTTPMethod.POST


class PowerBIGenerateReportTokenEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/reports/{reportId}/GenerateToken"
    method = HTTPMethod.POST


class PowerBIGenerateTileTokenEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/dashboards/{dashboardId}/tiles/{tileId}/GenerateToken"
    method = HTTPMethod.POST


# Push datasets. The `InGroup` variants address a workspace instead of My workspace.


class PowerBIDeleteRowsEndpoint(HTTPAPIRequestHandle):
    path = "datasets/{datasetId}/tables/{tableName}/rows"
    method = HTTPMethod.DELETE


class PowerBIDeleteRowsInGroupEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/datasets/{datasetId}/tables/{tableName}/rows"
    method = HTTPMethod.DELETE


class PowerBIListTablesEndpoint(HTTPAPIRequestHandle):
    path = "datasets/{datasetId}/tables"
    method = HTTPMethod.GET


class PowerBIListTablesInGroupEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/datasets/{datasetId}/tables"
    method = HTTPMethod.GET


class PowerBIPostDatasetEndpoint(HTTPAPIRequestHandle):
    path = "datasets"
    method = HTTPMethod.POST


class PowerBIPostDatasetInGroupEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/datasets"
    method = HTTPMethod.POST


class PowerBIPostRowsEndpoint(HTTPAPIRequestHandle):
    path = "datasets/{datasetId}/tables/{tableName}/rows"
    method = HTTPMethod.POST


class PowerBIPostRowsInGroupEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/datasets/{datasetId}/tables/{tableName}/rows"
    method = HTTPMethod.POST


class PowerBIPutTableEndpoint(HTTPAPIRequestHandle):
    path = "datasets/{datasetId}/tables/{tableName}"
    method = HTTPMethod.PUT


class PowerBIPutTableInGroupEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/datasets/{datasetId}/tables/{tableName}"
    method = HTTPMethod.PUT


# Reports. The `InGroup` variants address a workspace instead of My workspace.


class PowerBIBindReportToGatewayEndpoint(HTTPAPIRequestHandle):
    path = "reports/{reportId}/Default.BindToGateway"
    method = HTTPMethod.POST


class PowerBIBindReportToGatewayInGroupEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/reports/{reportId}/Default.BindToGateway"
    method = HTTPMethod.POST


class PowerBICloneReportEndpoint(HTTPAPIRequestHandle):
    path = "reports/{reportId}/Clone"
    method = HTTPMethod.POST


class PowerBICloneReportInGroupEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/reports/{reportId}/Clone"
    method = HTTPMethod.POST


class PowerBIDeleteReportEndpoint(HTTPAPIRequestHandle):
    path = "reports/{reportId}"
    method = HTTPMethod.DELETE


class PowerBIDeleteReportInGroupEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/reports/{reportId}"
    method = HTTPMethod.DELETE


class PowerBIGetPageEndpoint(HTTPAPIRequestHandle):
    path = "reports/{reportId}/pages/{pageName}"
    method = HTTPMethod.GET


class PowerBIGetPageInGroupEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/reports/{reportId}/pages/{pageName}"
    method = HTTPMethod.GET


class PowerBIListPagesEndpoint(HTTPAPIRequestHandle):
    path = "reports/{reportId}/pages"
    method = HTTPMethod.GET


class PowerBIListPagesInGroupEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/reports/{reportId}/pages"
    method = HTTPMethod.GET


class PowerBIGetReportEndpoint(HTTPAPIRequestHandle):
    path = "reports/{reportId}"
    method = HTTPMethod.GET


class PowerBIGetReportInGroupEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/reports/{reportId}"
    method = HTTPMethod.GET


class PowerBIListMyReportsEndpoint(HTTPAPIRequestHandle):
    path = "reports"
    method = HTTPMethod.GET


class PowerBIListReportsEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/reports"
    method = HTTPMethod.GET


class PowerBIRebindReportEndpoint(HTTPAPIRequestHandle):
    path = "reports/{reportId}/Rebind"
    method = HTTPMethod.POST


class PowerBIRebindReportInGroupEndpoint(HTTPAPIRequestHandle):
    path = "groups/{groupId}/reports/{reportId}/Rebind"
    method = HTTPMethod.POST
