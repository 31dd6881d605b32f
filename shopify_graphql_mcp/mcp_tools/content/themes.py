"""
Online store theme tools
"""

from typing import Any, Dict

from ..base import GraphQLTool, after_arg, array, enum, first_arg, id_arg, pick, schema, string

THEME_ROLES = ["MAIN", "UNPUBLISHED", "DEMO", "DEVELOPMENT"]
FILE_CONTENT_TYPES = ["JSON", "TEXT", "CSS", "LIQUID", "SVG", "JPG", "PNG", "WEBP", "ICO"]


def theme_id() -> Dict[str, Any]:
    return id_arg("OnlineStoreTheme", "Theme ID (e.g., 'gid://shopify/OnlineStoreTheme/123456789')")


class GetThemesTool(GraphQLTool):
    name = "get_themes"
    description = "Fetch themes from the Shopify store"
    input_schema = schema({
        "first": first_arg("themes"),
        "after": after_arg(),
        "role": enum(THEME_ROLES, "Filter by theme role"),
        "name": string("Filter by theme name"),
    })
    defaults = {"first": 50}
    query = """
    query GetThemes($first: Int!, $after: String, $roles: [ThemeRole!], $names: [String!]) {
      themes(first: $first, after: $after, roles: $roles, names: $names) {
        edges {
          node {
            id
            name
            role
            createdAt
            updatedAt
            processing
            processingFailed
            prefix
          }
          cursor
        }
        pageInfo {
          hasNextPage
          hasPreviousPage
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        variables = pick(args, "first", "after")
        # single filters become one-element lists
        if args.get("role"):
            variables["roles"] = [args["role"]]
        if args.get("name"):
            variables["names"] = [args["name"]]
        return variables


class GetThemeTool(GraphQLTool):
    name = "get_theme"
    description = "Fetch a specific theme by ID"
    input_schema = schema({"id": theme_id()}, required=["id"])
    query = """
    query GetTheme($id: ID!) {
      theme(id: $id) {
        id
        name
        role
        createdAt
        updatedAt
        processing
        processingFailed
        prefix
        themeStoreId
      }
    }
    """


class CreateThemeTool(GraphQLTool):
    name = "create_theme"
    description = "Create a new theme"
    input_schema = schema({
        "source": string("URL to the theme ZIP file", format="uri"),
        "name": string("Theme name"),
        "role": enum(THEME_ROLES, "Theme role"),
    }, required=["source"])
    defaults = {"role": "UNPUBLISHED"}
    query = """
    mutation CreateTheme($source: URL!, $name: String, $role: ThemeRole) {
      themeCreate(source: $source, name: $name, role: $role) {
        theme {
          id
          name
          role
          createdAt
          processing
        }
        userErrors {
          field
          message
        }
      }
    }
    """


class UpdateThemeTool(GraphQLTool):
    name = "update_theme"
    description = "Update an existing theme"
    input_schema = schema({
        "id": theme_id(),
        "name": string("Theme name"),
        "role": enum(THEME_ROLES, "Theme role"),
    }, required=["id"])
    query = """
    mutation UpdateTheme($id: ID!, $input: OnlineStoreThemeInput!) {
      themeUpdate(id: $id, input: $input) {
        theme {
          id
          name
          role
          updatedAt
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"id": args["id"], "input": pick(args, "name", "role")}


class PublishThemeTool(GraphQLTool):
    name = "publish_theme"
    description = "Publish a theme (make it the main theme)"
    input_schema = schema({"id": theme_id()}, required=["id"])
    query = """
    mutation PublishTheme($id: ID!) {
      themePublish(id: $id) {
        theme {
          id
          name
          role
        }
        userErrors {
          field
          message
        }
      }
    }
    """


class DeleteThemeTool(GraphQLTool):
    name = "delete_theme"
    description = "Delete a theme"
    input_schema = schema({"id": theme_id()}, required=["id"])
    query = """
    mutation DeleteTheme($id: ID!) {
      themeDelete(id: $id) {
        deletedThemeId
        userErrors {
          field
          message
        }
      }
    }
    """


class GetThemeFilesTool(GraphQLTool):
    name = "get_theme_files"
    description = "Fetch files from a theme"
    input_schema = schema({
        "themeId": theme_id(),
        "filenames": array(string(), "Specific files to fetch"),
        "first": first_arg("files"),
        "after": after_arg(),
    }, required=["themeId"])
    defaults = {"first": 50}
    query = """
    query GetThemeFiles($themeId: ID!, $filenames: [String!], $first: Int!, $after: String) {
      theme(id: $themeId) {
        id
        name
        files(filenames: $filenames, first: $first, after: $after) {
          edges {
            node {
              id
              filename
              contentType
              createdAt
              updatedAt
              size
            }
            cursor
          }
          pageInfo {
            hasNextPage
            hasPreviousPage
          }
        }
      }
    }
    """


class GetThemeFileTool(GraphQLTool):
    name = "get_theme_file"
    description = "Fetch a specific file from a theme"
    input_schema = schema({
        "themeId": theme_id(),
        "filename": string("Filename of the theme file (e.g., 'sections/header.liquid')"),
    }, required=["themeId", "filename"])
    query = """
    query GetThemeFile($themeId: ID!, $filename: String!) {
      theme(id: $themeId) {
        id
        name
        files(filenames: [$filename], first: 1) {
          edges {
            node {
              id
              filename
              contentType
              body {
                ... on OnlineStoreThemeFileBodyText {
                  value
                }
                ... on OnlineStoreThemeFileBodyJson {
                  value
                }
              }
              createdAt
              updatedAt
              size
            }
          }
        }
      }
    }
    """


class UpsertThemeFileTool(GraphQLTool):
    name = "upsert_theme_file"
    description = "Create or update a theme file"
    input_schema = schema({
        "themeId": theme_id(),
        "filename": string("Filename (e.g., 'sections/header.liquid')"),
        "content": string("File content"),
        "contentType": enum(FILE_CONTENT_TYPES, "Content type"),
    }, required=["themeId", "filename", "content", "contentType"])
    query = """
    mutation UpsertThemeFiles($themeId: ID!, $files: [OnlineStoreThemeFilesUpsertFileInput!]!) {
      themeFilesUpsert(themeId: $themeId, files: $files) {
        job {
          id
          done
        }
        upsertedThemeFiles {
          filename
          valid
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        body = {"type": args["contentType"], "value": args["content"]}
        return {"themeId": args["themeId"], "files": [{"filename": args["filename"], "body": body}]}
