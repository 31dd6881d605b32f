"""
Locale tools
"""

from ..base import GraphQLTool, boolean, schema, string

SHOP_LOCALES = """
          shop {
            id
            locales {
              locale
              name
              nativeName
              enabled
              published
            }
          }
          userErrors {
            field
            message
          }
"""


class GetLocalesTool(GraphQLTool):
    name = "get_locales"
    description = "Fetch available locales for the store"
    input_schema = schema({"publishable": boolean("Filter to only published locales")})
    defaults = {"publishable": False}
    query = """
    query GetLocales($publishable: Boolean) {
      shop {
        id
        name
        locales(publishable: $publishable) {
          locale
          name
          nativeName
          enabled
          published
        }
      }
    }
    """


class GetTranslationsTool(GraphQLTool):
    name = "get_translations"
    description = "Fetch translations for a locale"
    input_schema = schema({
        "locale": string("Locale code (e.g., 'en', 'fr', 'es')"),
        "namespace": string("Filter by translation namespace"),
    }, required=["locale"])
    query = """
    query GetTranslations($locale: String!, $namespace: String) {
      translations(locale: $locale, namespace: $namespace) {
        key
        value
        locale
        namespace
      }
    }
    """


class PublishLocaleTool(GraphQLTool):
    name = "publish_locale"
    description = "Publish a locale to make it available on the storefront"
    input_schema = schema({"locale": string("Locale code to publish")}, required=["locale"])
    query = """
    mutation LocalePublish($locale: String!) {
      localePublish(locale: $locale) {""" + SHOP_LOCALES + """      }
    }
    """


class UnpublishLocaleTool(GraphQLTool):
    name = "unpublish_locale"
    description = "Unpublish a locale"
    input_schema = schema({"locale": string("Locale code to unpublish")}, required=["locale"])
    query = """
    mutation LocaleUnpublish($locale: String!) {
      localeUnpublish(locale: $locale) {""" + SHOP_LOCALES + """      }
    }
    """
