"""
Tests for tool execution: argument handling, variables and result text.
"""
import json

import pytest

from shopify_graphql_mcp.graphql_client import GraphQLTransportError
from shopify_graphql_mcp.mcp_tools.advanced.custom_pixels import ToggleCustomPixelTool
from shopify_graphql_mcp.mcp_tools.base import (
    compact,
    first_arg,
    pick,
    validate_object,
)
from shopify_graphql_mcp.mcp_tools.commerce.checkouts import CompleteCheckoutTool
from shopify_graphql_mcp.mcp_tools.commerce.subscriptions import (
    CancelSubscriptionContractTool,
    FailSubscriptionContractTool,
)
from shopify_graphql_mcp.mcp_tools.content.files import CreateStagedUploadTool
from shopify_graphql_mcp.mcp_tools.essential.discounts import CreateDiscountTool
from shopify_graphql_mcp.mcp_tools.essential.products import GetProductsTool
from shopify_graphql_mcp.mcp_tools.marketing.analytics import GetAnalyticsReportTool
from shopify_graphql_mcp.mcp_tools.marketing.markets import DeleteMarketTool, GetMarketsHomeTool
from shopify_graphql_mcp.mcp_tools.marketing.publications import GetPublicationCollectionsTool


def text_of(result):
    return result["content"][0]["text"]


@pytest.mark.asyncio
async def test_required_argument_reaches_variables(make_client):
    """One transport call carrying the required argument"""
    client = make_client(data={"marketDelete": {"deletedId": "gid://shopify/Market/1"}})
    result = await DeleteMarketTool(client).execute(id="gid://shopify/Market/1")

    assert len(client.calls) == 1
    query, variables = client.calls[0]
    assert "marketDelete" in query
    assert variables == {"id": "gid://shopify/Market/1"}
    assert result["isError"] is False
    assert json.loads(text_of(result)) == {"marketDelete": {"deletedId": "gid://shopify/Market/1"}}


@pytest.mark.asyncio
async def test_omitted_optionals_are_absent(make_client):
    """Defaults are applied and unset optional arguments never appear"""
    client = make_client(data={"products": {"edges": []}})
    await GetProductsTool(client).execute()

    _, variables = client.calls[0]
    assert variables == {"first": 50, "sortKey": "CREATED_AT", "reverse": True}
    assert "query" not in variables
    assert "after" not in variables


@pytest.mark.asyncio
async def test_none_arguments_are_dropped(make_client):
    client = make_client()
    await GetProductsTool(client).execute(first=10, query=None, after=None)

    _, variables = client.calls[0]
    assert variables["first"] == 10
    assert "query" not in variables
    assert "after" not in variables


@pytest.mark.asyncio
async def test_graphql_errors_are_returned_verbatim(make_client):
    errors = [{"message": "Access denied for products field."}]
    client = make_client(errors=errors)

    result = await GetProductsTool(client).execute()

    assert result["isError"] is True
    text = text_of(result)
    assert text.startswith("GraphQL Errors: ")
    assert json.loads(text[len("GraphQL Errors: "):]) == errors


@pytest.mark.asyncio
async def test_transport_failure_is_error_text(make_client):
    client = make_client(exc=GraphQLTransportError("GraphQL request failed: timed out"))

    result = await GetProductsTool(client).execute()

    assert result["isError"] is True
    assert text_of(result) == "Error: GraphQL request failed: timed out"


@pytest.mark.asyncio
async def test_missing_required_argument_skips_transport(make_client):
    client = make_client()
    result = await DeleteMarketTool(client).execute()

    assert client.calls == []
    assert result["isError"] is True
    assert text_of(result) == "Error: Missing required argument: id"


@pytest.mark.asyncio
async def test_out_of_range_and_enum_arguments(make_client):
    client = make_client()
    result = await GetProductsTool(client).execute(first=0, sortKey="PRICE_DESC")

    assert client.calls == []
    text = text_of(result)
    assert "first must be >= 1" in text
    assert "sortKey must be one of:" in text


@pytest.mark.asyncio
async def test_tool_without_arguments(make_client):
    client = make_client(data={"marketsHome": {"totalMarkets": 3}})
    await GetMarketsHomeTool(client).execute()

    assert client.calls[0][1] == {}


@pytest.mark.asyncio
async def test_renamed_argument(make_client):
    """publicationId is sent as the id variable"""
    client = make_client()
    await GetPublicationCollectionsTool(client).execute(publicationId="gid://shopify/Publication/7")

    query, variables = client.calls[0]
    assert "GetPublicationCollections" in query
    assert variables == {"id": "gid://shopify/Publication/7", "first": 50}


@pytest.mark.asyncio
async def test_create_percentage_discount(make_client):
    client = make_client()
    await CreateDiscountTool(client).execute(
        title="Spring sale",
        code="SPRING10",
        discountType="PERCENTAGE",
        value="0.1",
        startsAt="2026-03-01T00:00:00Z",
    )

    _, variables = client.calls[0]
    discount = variables["input"]
    assert discount["customerGets"]["value"] == {"percentage": 0.1}
    assert discount["appliesOncePerCustomer"] is False
    assert "endsAt" not in discount
    assert "usageLimit" not in discount
    assert "minimumRequirement" not in discount


@pytest.mark.asyncio
async def test_create_fixed_discount_with_minimum(make_client):
    client = make_client()
    await CreateDiscountTool(client).execute(
        title="Ten off",
        code="TENOFF",
        discountType="FIXED_AMOUNT",
        value="10",
        startsAt="2026-03-01T00:00:00Z",
        minimumRequirement="MINIMUM_PURCHASE_AMOUNT",
        minimumSubtotal="50",
        usageLimit=100,
    )

    discount = client.calls[0][1]["input"]
    assert discount["customerGets"]["value"] == {
        "discountAmount": {"amount": "10", "appliesOnEachItem": False}
    }
    assert discount["minimumRequirement"] == {"subtotal": {"greaterThanOrEqualToSubtotal": "50"}}
    assert discount["usageLimit"] == 100


@pytest.mark.asyncio
async def test_complete_checkout_answers_without_api_call(make_client):
    client = make_client()
    result = await CompleteCheckoutTool(client).execute(checkoutId="gid://shopify/Checkout/1")

    assert client.calls == []
    guidance = json.loads(text_of(result))
    assert guidance["checkoutId"] == "gid://shopify/Checkout/1"
    assert len(guidance["steps"]) == 4


@pytest.mark.asyncio
@pytest.mark.parametrize("enabled,operation", [(True, "customPixelEnable"), (False, "customPixelDisable")])
async def test_toggle_custom_pixel_picks_mutation(make_client, enabled, operation):
    client = make_client()
    await ToggleCustomPixelTool(client).execute(id="gid://shopify/CustomPixel/3", enabled=enabled)

    query, variables = client.calls[0]
    assert f"{operation}(id: $id)" in query
    assert variables == {"id": "gid://shopify/CustomPixel/3"}


@pytest.mark.asyncio
async def test_analytics_report_wraps_data(make_client):
    client = make_client(data={"shop": {"id": "gid://shopify/Shop/1", "name": "Test"}})
    result = await GetAnalyticsReportTool(client).execute(
        reportType="sales", startDate="2026-01-01", endDate="2026-01-31",
    )

    assert client.calls[0][1] == {}
    report = json.loads(text_of(result))
    assert report["period"] == {"startDate": "2026-01-01", "endDate": "2026-01-31", "granularity": "daily"}
    assert report["data"]["shop"]["name"] == "Test"
    assert "ShopifyQL" in report["note"]


@pytest.mark.asyncio
async def test_staged_upload(make_client):
    targets = [{"url": "https://upload.example.com", "resourceUrl": "https://cdn.example.com/a.png"}]
    client = make_client(data={"stagedUploadsCreate": {"stagedTargets": targets, "userErrors": []}})

    result = await CreateStagedUploadTool(client).execute(
        filename="a.png", mimeType="image/png", resource="IMAGE", fileSize=2048,
    )

    _, variables = client.calls[0]
    assert variables == {"input": [{"filename": "a.png", "mimeType": "image/png",
                                    "resource": "IMAGE", "fileSize": "2048"}]}
    body = json.loads(text_of(result))
    assert body["stagedTargets"] == targets
    assert body["userErrors"] == []
    assert body["note"]


@pytest.mark.asyncio
async def test_subscription_status_tools(make_client):
    client = make_client()
    tool = FailSubscriptionContractTool(client)

    assert tool.input_schema["required"] == ["subscriptionContractId"]
    assert "mark as failed" in tool.input_schema["properties"]["subscriptionContractId"]["description"]
    assert CancelSubscriptionContractTool.input_schema is not tool.input_schema

    await tool.execute(subscriptionContractId="gid://shopify/SubscriptionContract/5")
    query, variables = client.calls[0]
    assert "subscriptionContractFail" in query
    assert "lastPaymentStatus" in query
    assert variables == {"subscriptionContractId": "gid://shopify/SubscriptionContract/5"}


def test_pick_and_compact():
    args = {"title": "Hat", "vendor": None, "body": "<p>Warm</p>"}

    assert compact(args) == {"title": "Hat", "body": "<p>Warm</p>"}
    assert pick(args, "title", "vendor", "missing", descriptionHtml="body") == {
        "title": "Hat", "descriptionHtml": "<p>Warm</p>",
    }


def test_validate_nested_objects():
    definition = {
        "type": "object",
        "properties": {
            "first": first_arg(),
            "items": {
                "type": "array",
                "minItems": 1,
                "items": {
                    "type": "object",
                    "properties": {"quantity": {"type": "integer", "minimum": 1}},
                    "required": ["quantity"],
                },
            },
        },
        "required": ["items"],
    }

    assert validate_object({"items": [{"quantity": 2}]}, definition) == []
    assert validate_object({"items": []}, definition) == ["items must contain at least 1 item(s)"]
    assert validate_object({"items": [{}]}, definition) == ["Missing required argument: items[0].quantity"]
    assert validate_object({"items": [{"quantity": 1}], "first": True}, definition) == ["first must be an integer"]
    assert validate_object({"items": [{"quantity": 1}], "first": 300}, definition) == ["first must be <= 250"]
