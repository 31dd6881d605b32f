"""
Privacy settings tools
"""

from typing import Any, Dict

from ..base import GraphQLTool, boolean, schema, string

PRIVACY_MESSAGES = ("checkoutPrivacyMessage", "customerAccountsPrivacyMessage", "marketingPrivacyMessage")

GDPR = """
              gdprApplies
              legalPrivacyName
"""


class GetPrivacySettingsTool(GraphQLTool):
    name = "get_privacy_settings"
    description = "Fetch privacy settings from the Shopify store"
    input_schema = schema()
    query = """
    query GetPrivacySettings {
      privacy {
        checkout {""" + GDPR + """        }
        customerAccounts {""" + GDPR + """        }
        marketing {""" + GDPR + """        }
        preferences {""" + GDPR + """        }
      }
    }
    """


class UpdatePrivacySettingsTool(GraphQLTool):
    name = "update_privacy_settings"
    description = "Update privacy settings"
    input_schema = schema({
        "gdprApplies": boolean("Whether GDPR applies"),
        "legalPrivacyName": string("Legal privacy name"),
        "checkoutPrivacyMessage": string("Checkout privacy message"),
        "customerAccountsPrivacyMessage": string("Customer accounts privacy message"),
        "marketingPrivacyMessage": string("Marketing privacy message"),
    })
    query = """
    mutation UpdatePrivacySettings($input: PrivacySettingsInput!) {
      privacySettingsUpdate(input: $input) {
        privacy {
          checkout {""" + GDPR + """          }
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        settings = {}
        if "gdprApplies" in args:
            settings["gdprApplies"] = args["gdprApplies"]
        if args.get("legalPrivacyName"):
            settings["legalPrivacyName"] = args["legalPrivacyName"]
        # the messages travel together under privacyOptions
        options = {key: args[key] for key in PRIVACY_MESSAGES if args.get(key)}
        if options:
            settings["privacyOptions"] = options
        return {"input": settings}


class GetVisitorPrivacyConsentTool(GraphQLTool):
    name = "get_visitor_privacy_consent"
    description = "Get visitor privacy consent status"
    input_schema = schema({"visitorId": string("Visitor ID")}, required=["visitorId"])
    query = """
    query GetVisitorPrivacyConsent($visitorId: ID!) {
      visitor(id: $visitorId) {
        id
        privacy {
          gdprApplies
          marketingConsent {
            grantedAt
            marketingMethod
          }
          preferencesConsent {
            grantedAt
          }
        }
      }
    }
    """
