"""Descriptors for every operation the High Systems REST API exposes.

One entry per client method. Paths are relative to /api/rest/v1; required
lists only the non-path options, since every path placeholder is required.
"""

from highsystems.operations.descriptors import RequestDescriptor

OPERATIONS: tuple[RequestDescriptor, ...] = (
    RequestDescriptor("get_transaction", "GET", "/transactions"),
    RequestDescriptor("delete_transaction", "DELETE", "/transactions/{id}"),
    RequestDescriptor("post_transaction", "POST", "/transactions/{id}"),
    RequestDescriptor("get_realm_settings", "GET", "/settings"),
    RequestDescriptor("put_realm_settings", "PUT", "/settings", body=True),
    RequestDescriptor("get_users", "GET", "/users"),
    RequestDescriptor("post_user", "POST", "/users", body=True, required=("email",)),
    RequestDescriptor("delete_user", "DELETE", "/users/{userid}"),
    RequestDescriptor("get_user", "GET", "/users/{userid}"),
    RequestDescriptor(
        "put_user", "PUT",
        "/users/{userid}",
        body=True,
        required=(
            "email", "password", "firstName", "middleName", "lastName", "isRealmAdmin",
            "isRealmLimitedAdmin", "reset", "valid", "twoFactorEnabled",
        ),
    ),
    RequestDescriptor("get_user_tokens", "GET", "/users/{userid}/tokens"),
    RequestDescriptor(
        "post_user_token", "POST",
        "/users/{userid}/tokens",
        body=True,
        required=("name", "active"),
    ),
    RequestDescriptor("delete_user_token", "DELETE", "/users/{userid}/tokens/{tokenid}"),
    RequestDescriptor("get_user_token", "GET", "/users/{userid}/tokens/{tokenid}"),
    RequestDescriptor(
        "put_user_token", "PUT",
        "/users/{userid}/tokens/{tokenid}",
        body=True,
        required=("name", "description", "applications", "active"),
    ),
    RequestDescriptor("get_applications", "GET", "/applications"),
    RequestDescriptor(
        "post_application", "POST",
        "/applications",
        body=True,
        required=("name", "dateFormat", "datetimeFormat", "timeFormat"),
    ),
    RequestDescriptor("delete_application", "DELETE", "/applications/{appid}"),
    RequestDescriptor("get_application", "GET", "/applications/{appid}"),
    RequestDescriptor(
        "put_application", "PUT",
        "/applications/{appid}",
        body=True,
        required=(
            "icon", "name", "description", "dateFormat", "datetimeFormat", "timeFormat",
            "defaultMenu", "defaultCurrency",
        ),
    ),
    RequestDescriptor("get_application_menus", "GET", "/applications/{appid}/menus"),
    RequestDescriptor(
        "post_application_menu", "POST",
        "/applications/{appid}/menus",
        body=True,
        required=("name", "groups"),
    ),
    RequestDescriptor("delete_application_menu", "DELETE", "/applications/{appid}/menus/{menuid}"),
    RequestDescriptor("get_application_menu", "GET", "/applications/{appid}/menus/{menuid}"),
    RequestDescriptor(
        "put_application_menu", "PUT",
        "/applications/{appid}/menus/{menuid}",
        body=True,
        required=("name", "groups"),
    ),
    RequestDescriptor("get_application_user_menu", "GET", "/applications/{appid}/menus/user"),
    RequestDescriptor("get_variables", "GET", "/applications/{appid}/variables"),
    RequestDescriptor("get_variable", "GET", "/applications/{appid}/variables/{variableid}"),
    RequestDescriptor(
        "post_variable", "POST",
        "/applications/{relatedApplication}/variables",
        body=True,
        required=("name",),
    ),
    RequestDescriptor(
        "delete_variable", "DELETE",
        "/applications/{relatedApplication}/variables/{variableid}",
    ),
    RequestDescriptor(
        "put_variable", "PUT",
        "/applications/{relatedApplication}/variables/{variableid}",
        body=True,
        required=("name", "value"),
    ),
    RequestDescriptor("get_roles", "GET", "/applications/{appid}/roles"),
    RequestDescriptor("get_role", "GET", "/applications/{appid}/roles/{roleid}"),
    RequestDescriptor(
        "post_role", "POST",
        "/applications/{relatedApplication}/roles",
        body=True,
        required=("name",),
    ),
    RequestDescriptor(
        "delete_role", "DELETE",
        "/applications/{relatedApplication}/roles/{roleid}",
    ),
    RequestDescriptor(
        "put_role", "PUT",
        "/applications/{relatedApplication}/roles/{roleid}",
        body=True,
        required=(
            "name", "description", "isAdmin", "isLimitedAdmin", "canInvite", "readonly",
            "defaultDashboard", "relatedMenu", "permissions",
        ),
    ),
    RequestDescriptor(
        "get_role_permissions", "GET",
        "/applications/{appid}/roles/{roleid}/permissions",
    ),
    RequestDescriptor("get_role_defaults", "GET", "/applications/{appid}/roles/{roleid}/defaults"),
    RequestDescriptor("get_application_users", "GET", "/applications/{appid}/users"),
    RequestDescriptor("get_application_user", "GET", "/applications/{appid}/users/{userid}"),
    RequestDescriptor(
        "post_application_user", "POST",
        "/applications/{relatedApplication}/users",
        body=True,
        required=("relatedRole",),
    ),
    RequestDescriptor(
        "put_application_user", "PUT",
        "/applications/{relatedApplication}/users/{applicationUserId}",
        body=True,
        required=("relatedUser", "relatedRole"),
    ),
    RequestDescriptor(
        "delete_application_user", "DELETE",
        "/applications/{relatedApplication}/users/{userid}",
    ),
    RequestDescriptor("get_tables", "GET", "/applications/{appid}/tables"),
    RequestDescriptor("delete_table", "DELETE", "/applications/{appid}/tables/{tableid}"),
    RequestDescriptor("get_table", "GET", "/applications/{appid}/tables/{tableid}"),
    RequestDescriptor(
        "put_table", "PUT",
        "/applications/{appid}/tables/{tableid}",
        body=True,
        required=(
            "relatedApplication", "icon", "name", "description", "singular", "plural",
            "recordPicker", "recordLabel", "displayOnMenu", "defaultDashboard", "defaultForm",
            "dataRule",
        ),
    ),
    RequestDescriptor(
        "post_table", "POST",
        "/applications/{relatedApplication}/tables",
        body=True,
        required=("name", "singular", "plural"),
    ),
    RequestDescriptor(
        "get_application_relationships", "GET",
        "/applications/{appid}/relationships",
    ),
    RequestDescriptor(
        "get_table_relationships", "GET",
        "/applications/{appid}/tables/relationships",
        query=("tableid",),
        required=("tableid",),
    ),
    RequestDescriptor("get_application_fields", "GET", "/applications/{appid}/fields"),
    RequestDescriptor(
        "get_fields", "GET",
        "/applications/{appid}/tables/{tableid}/fields",
        query=("clist",),
    ),
    RequestDescriptor(
        "delete_field", "DELETE",
        "/applications/{appid}/tables/{tableid}/fields/{fieldid}",
    ),
    RequestDescriptor(
        "get_field", "GET",
        "/applications/{appid}/tables/{tableid}/fields/{fieldid}",
    ),
    RequestDescriptor(
        "post_field", "POST",
        "/applications/{appid}/tables/{relatedTable}/fields",
        body=True,
        required=("field",),
    ),
    RequestDescriptor(
        "put_field", "PUT",
        "/applications/{appid}/tables/{relatedTable}/fields/{fieldid}",
        body=True,
        required=("field",),
    ),
    RequestDescriptor("get_application_reports", "GET", "/applications/{appid}/reports"),
    RequestDescriptor("get_reports", "GET", "/applications/{appid}/tables/{tableid}/reports"),
    RequestDescriptor(
        "delete_report", "DELETE",
        "/applications/{appid}/tables/{tableid}/reports/{reportid}",
    ),
    RequestDescriptor(
        "get_report", "GET",
        "/applications/{appid}/tables/{tableid}/reports/{reportid}",
    ),
    RequestDescriptor(
        "post_report", "POST",
        "/applications/{appid}/tables/{relatedTable}/reports",
        body=True,
        required=("report",),
    ),
    RequestDescriptor(
        "put_report", "PUT",
        "/applications/{appid}/tables/{relatedTable}/reports/{reportid}",
        body=True,
        required=("report",),
    ),
    RequestDescriptor("get_application_forms", "GET", "/applications/{appid}/forms"),
    RequestDescriptor("get_forms", "GET", "/applications/{appid}/tables/{tableid}/forms"),
    RequestDescriptor(
        "delete_form", "DELETE",
        "/applications/{appid}/tables/{tableid}/forms/{formid}",
    ),
    RequestDescriptor("get_form", "GET", "/applications/{appid}/tables/{tableid}/forms/{formid}"),
    RequestDescriptor(
        "post_form", "POST",
        "/applications/{appid}/tables/{relatedTable}/forms",
        body=True,
        required=("name", "schema", "layout", "rules", "properties"),
    ),
    RequestDescriptor(
        "put_form", "PUT",
        "/applications/{appid}/tables/{relatedTable}/forms/{formid}",
        body=True,
        required=("name", "description", "schema", "layout", "rules", "properties"),
    ),
    RequestDescriptor(
        "get_application_entity_relationship_diagram", "GET",
        "/applications/{appid}/erd",
    ),
    RequestDescriptor(
        "put_application_entity_relationship_diagram", "PUT",
        "/applications/{appid}/erd/{diagramid}",
        body=True,
        required=("layout",),
    ),
    RequestDescriptor(
        "get_dashboards", "GET",
        "/applications/{appid}/dashboards",
        query=("relatedTable",),
    ),
    RequestDescriptor(
        "post_dashboard", "POST",
        "/applications/{appid}/dashboards",
        body=True,
        required=("type", "name", "schema", "layout", "properties"),
    ),
    RequestDescriptor(
        "delete_dashboard", "DELETE",
        "/applications/{appid}/dashboards/{dashboardid}",
        query=("tableid",),
    ),
    RequestDescriptor(
        "get_dashboard", "GET",
        "/applications/{appid}/dashboards/{dashboardid}",
        query=("relatedTable",),
    ),
    RequestDescriptor(
        "put_dashboard", "PUT",
        "/applications/{appid}/dashboards/{dashboardid}",
        body=True,
        required=("relatedTable", "type", "name", "description", "schema", "layout", "properties"),
    ),
    RequestDescriptor("get_pages", "GET", "/applications/{appid}/pages"),
    RequestDescriptor(
        "post_page", "POST",
        "/applications/{appid}/pages",
        body=True,
        required=("name", "content", "properties"),
    ),
    RequestDescriptor("delete_page", "DELETE", "/applications/{appid}/pages/{pageid}"),
    RequestDescriptor("get_page", "GET", "/applications/{appid}/pages/{pageid}"),
    RequestDescriptor(
        "put_page", "PUT",
        "/applications/{appid}/pages/{pageid}",
        body=True,
        required=("name", "content", "properties"),
    ),
    RequestDescriptor(
        "get_notifications", "GET",
        "/applications/{appid}/tables/{tableid}/notifications",
    ),
    RequestDescriptor(
        "delete_notification", "DELETE",
        "/applications/{appid}/tables/{tableid}/notifications/{notificationid}",
    ),
    RequestDescriptor(
        "get_notification", "GET",
        "/applications/{appid}/tables/{tableid}/notifications/{notificationid}",
    ),
    RequestDescriptor(
        "put_notification", "PUT",
        "/applications/{appid}/tables/{tableid}/notifications/{notificationid}",
        body=True,
        required=(
            "relatedTable", "relatedOwner", "active", "name", "description", "type", "condition",
            "from", "to", "cc", "bcc", "subject", "html", "body", "attachments",
        ),
    ),
    RequestDescriptor(
        "post_notification", "POST",
        "/applications/{appid}/tables/{relatedTable}/notifications",
        body=True,
        required=("active", "name", "condition", "to", "subject"),
    ),
    RequestDescriptor("get_webhooks", "GET", "/applications/{appid}/tables/{tableid}/webhooks"),
    RequestDescriptor(
        "delete_webhook", "DELETE",
        "/applications/{appid}/tables/{tableid}/webhooks/{webhookid}",
    ),
    RequestDescriptor(
        "get_webhook", "GET",
        "/applications/{appid}/tables/{tableid}/webhooks/{webhookid}",
    ),
    RequestDescriptor(
        "put_webhook", "PUT",
        "/applications/{appid}/tables/{tableid}/webhooks/{webhookid}",
        body=True,
        required=(
            "relatedTable", "relatedOwner", "active", "name", "description", "type", "condition",
            "endpoint", "method", "headers", "body",
        ),
    ),
    RequestDescriptor(
        "post_webhook", "POST",
        "/applications/{appid}/tables/{relatedTable}/webhooks",
        body=True,
        required=(
            "relatedOwner", "active", "name", "description", "type", "condition", "endpoint",
            "method", "headers", "body",
        ),
    ),
    RequestDescriptor("get_functions", "GET", "/applications/{appid}/functions"),
    RequestDescriptor(
        "post_function", "POST",
        "/applications/{appid}/functions",
        body=True,
        required=("name", "body"),
    ),
    RequestDescriptor("delete_function", "DELETE", "/applications/{appid}/functions/{functionid}"),
    RequestDescriptor("get_function", "GET", "/applications/{appid}/functions/{functionid}"),
    RequestDescriptor(
        "put_function", "PUT",
        "/applications/{appid}/functions/{functionid}",
        body=True,
        required=("name", "body"),
    ),
    RequestDescriptor("get_triggers", "GET", "/applications/{appid}/triggers"),
    RequestDescriptor(
        "post_trigger", "POST",
        "/applications/{appid}/triggers",
        body=True,
        required=("name", "timing", "event", "relatedTable", "forEach", "relatedFunction"),
    ),
    RequestDescriptor("delete_trigger", "DELETE", "/applications/{appid}/triggers/{triggerid}"),
    RequestDescriptor("get_trigger", "GET", "/applications/{appid}/triggers/{triggerid}"),
    RequestDescriptor(
        "put_trigger", "PUT",
        "/applications/{appid}/triggers/{triggerid}",
        body=True,
        required=(
            "owner", "name", "timing", "event", "relatedTable", "forEach", "relatedFunction",
        ),
    ),
    RequestDescriptor(
        "get_records", "GET",
        "/applications/{appid}/tables/{tableid}/records",
        query=(
            "type", "query", "columns", "summarize", "grouping", "sorting", "page", "mergeQuery",
            "reportid",
        ),
    ),
    RequestDescriptor(
        "post_record", "POST",
        "/applications/{appid}/tables/{tableid}/records",
        body=True,
        required=("format",),
    ),
    RequestDescriptor(
        "get_records_count", "GET",
        "/applications/{appid}/tables/{tableid}/records/count",
        query=("reportid", "query", "mergeQuery"),
    ),
    RequestDescriptor(
        "get_records_totals", "GET",
        "/applications/{appid}/tables/{tableid}/records/totals",
        query=(
            "type", "query", "totals", "columns", "summarize", "grouping", "sorting", "page",
            "mergeQuery", "reportid",
        ),
    ),
    RequestDescriptor(
        "delete_record", "DELETE",
        "/applications/{appid}/tables/{tableid}/records/{recordid}",
    ),
    RequestDescriptor(
        "get_record", "GET",
        "/applications/{appid}/tables/{tableid}/records/{recordid}",
        query=("clist",),
    ),
    RequestDescriptor(
        "put_record", "PUT",
        "/applications/{appid}/tables/{tableid}/records/{id}",
        body=True,
        required=("format",),
    ),
    RequestDescriptor(
        "upsert_records", "POST",
        "/applications/{appid}/tables/{tableid}/records/upsert",
        body=True,
        required=("data",),
    ),
    RequestDescriptor(
        "calculate_record_formulas", "POST",
        "/applications/{appid}/tables/{tableid}/calculate-formulas",
        body=True,
        required=("formulas", "adHocData"),
    ),
    RequestDescriptor("get_file", "GET", "/files/{appid}/{tableid}/{recordid}/{fieldid}"),
    RequestDescriptor(
        "get_presigned_file_url", "GET",
        "/files/presigned",
        query=(
            "appid", "tableid", "recordid", "fieldid", "pageid", "logo", "action", "contentType",
            "responseDisposition", "responseType",
        ),
        required=("action",),
    ),
    RequestDescriptor(
        "finalize_file_upload", "GET",
        "/files/finalize",
        query=("appid", "tableid", "recordid", "fieldid", "tmpLocation", "size", "filename"),
        required=("appid", "tableid", "recordid", "fieldid", "tmpLocation", "size", "filename"),
    ),
)

_BY_NAME: dict[str, RequestDescriptor] = {op.name: op for op in OPERATIONS}


def get_descriptor(name: str) -> RequestDescriptor:
    """Look up an operation by client method name."""
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(f"Unknown operation: {name}") from None
