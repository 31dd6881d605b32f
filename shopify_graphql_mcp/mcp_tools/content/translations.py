"""
Translation tools
"""

from typing import Any, Dict

from ..base import GraphQLTool, after_arg, array, enum, first_arg, id_arg, pick, schema, string

RESOURCE_TYPES = ["PRODUCT", "COLLECTION", "ARTICLE", "PAGE", "BRAND", "SHOP", "METAFIELD_DEFINITION"]

TRANSLATABLE_CONTENT = """
            translatableContent {
              key
              value
              digest
            }
"""


def resource_id(description: str = "Resource ID (e.g., 'gid://shopify/Product/123456789')") -> Dict[str, Any]:
    return id_arg("Product", description)


class GetTranslatableResourcesTool(GraphQLTool):
    name = "get_translatable_resources"
    description = "Fetch translatable resources from the store"
    input_schema = schema({
        "resourceType": enum(RESOURCE_TYPES, "Filter by resource type"),
        "first": first_arg("resources"),
        "after": after_arg(),
    })
    defaults = {"first": 50}
    query = """
    query GetTranslatableResources($resourceType: TranslatableResourceType, $first: Int!, $after: String) {
      translatableResources(resourceType: $resourceType, first: $first, after: $after) {
        edges {
          node {
            resourceId
            resourceType""" + TRANSLATABLE_CONTENT + """          }
          cursor
        }
        pageInfo {
          hasNextPage
          hasPreviousPage
        }
      }
    }
    """


class RegisterTranslationTool(GraphQLTool):
    name = "register_translation"
    description = "Create or update a translation for a resource"
    input_schema = schema({
        "resourceId": resource_id("Resource ID to translate (e.g., 'gid://shopify/Product/123456789')"),
        "locale": string("ISO code of the locale (e.g., 'fr', 'es', 'de')"),
        "key": string("Translatable content key"),
        "value": string("Translated value"),
        "marketId": string("Market ID for market-specific translation"),
    }, required=["resourceId", "locale", "key", "value"])
    query = """
    mutation RegisterTranslation($resourceId: ID!, $translations: [TranslationInput!]!) {
      translationsRegister(resourceId: $resourceId, translations: $translations) {
        translations {
          key
          locale
          value
          outdated
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        translation = pick(args, "locale", "key", "value")
        translation["translatableContentDigest"] = "auto"
        if args.get("marketId"):
            translation["marketId"] = args["marketId"]
        return {"resourceId": args["resourceId"], "translations": [translation]}


class RemoveTranslationsTool(GraphQLTool):
    name = "remove_translations"
    description = "Remove translations from a resource"
    input_schema = schema({
        "resourceId": resource_id(),
        "translationKeys": array(string(), "Translation keys to remove"),
        "locales": array(string(), "Locale codes to remove (e.g., ['fr', 'es'])"),
        "marketIds": array(string(), "Market IDs for market-specific translations"),
    }, required=["resourceId", "translationKeys", "locales"])
    query = """
    mutation RemoveTranslations($resourceId: ID!, $translationKeys: [String!]!, $locales: [String!]!, $marketIds: [ID!]) {
      translationsRemove(resourceId: $resourceId, translationKeys: $translationKeys, locales: $locales, marketIds: $marketIds) {
        translations {
          key
          locale
        }
        userErrors {
          field
          message
        }
      }
    }
    """


class GetTranslationsForResourceTool(GraphQLTool):
    name = "get_translations_for_resource"
    description = "Get translations for a specific resource"
    input_schema = schema({"resourceId": resource_id()}, required=["resourceId"])
    query = """
    query GetTranslations($id: ID!) {
      translatableResource(id: $id) {
        resourceId
        resourceType""" + TRANSLATABLE_CONTENT + """        translations {
          key
          locale
          value
          outdated
          market {
            id
            name
          }
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"id": args["resourceId"]}
