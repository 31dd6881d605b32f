"""
File tools

Uploading is a two step process: ``create_staged_upload`` returns a target to
POST the file to, and ``create_file`` registers the uploaded URL.
"""

from typing import Any, Dict

from ..base import (
    GraphQLTool, after_arg, enum, first_arg, id_arg, integer, pick, query_arg,
    reverse_arg, schema, string,
)

RESOURCE_TYPES = ["IMAGE", "VIDEO", "MODEL_3D", "FILE"]

IMAGE = """
                id
                url
                altText
                width
                height
"""

VIDEO_SOURCES = """
              sources {
                url
                mimeType
                width
                height
              }
              originalSource {
                url
                mimeType
                width
                height
              }
"""

FILE_DETAILS = """
              alt
              createdAt
              updatedAt
              filename
              mimeType
              originalFileSize
              fileStatus
"""

PREVIEW = """
              preview {
                image {""" + IMAGE + """                }
              }
"""

UPLOAD_NOTE = ("Use the stagedTargets.url and parameters to upload your file via HTTP POST, "
               "then use the returned URL with create_file.")


class GetFilesTool(GraphQLTool):
    name = "get_files"
    description = "Fetch files uploaded to the store (images, videos, PDFs, etc.)"
    input_schema = schema({
        "first": first_arg("files"),
        "after": after_arg(),
        "query": query_arg("Filter query (e.g., 'filename:image', 'mimeType:image/*')"),
        "sortKey": enum(["CREATED_AT", "FILENAME", "ID"], "Field to sort by"),
        "reverse": reverse_arg(),
    })
    defaults = {"first": 50, "sortKey": "CREATED_AT", "reverse": True}
    query = """
    query GetFiles($first: Int!, $after: String, $query: String, $sortKey: FileSortKeys, $reverse: Boolean) {
      files(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse) {
        edges {
          node {
            id""" + FILE_DETAILS + PREVIEW + """
            ... on MediaImage {
              image {""" + IMAGE + """              }
            }
            ... on Video {""" + VIDEO_SOURCES + """            }
            ... on GenericFile {
              url
            }
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


class GetFileTool(GraphQLTool):
    name = "get_file"
    description = "Fetch a specific file by ID"
    input_schema = schema({
        "id": id_arg("MediaImage", "File ID (e.g., 'gid://shopify/MediaImage/123456789')"),
    }, required=["id"])
    query = """
    query GetFile($id: ID!) {
      node(id: $id) {
        id
        ... on MediaImage {""" + FILE_DETAILS + """
          image {""" + IMAGE + """          }""" + PREVIEW + """        }
        ... on Video {""" + FILE_DETAILS + VIDEO_SOURCES + PREVIEW + """        }
        ... on GenericFile {""" + FILE_DETAILS + """
          url""" + PREVIEW + """        }
      }
    }
    """


class CreateStagedUploadTool(GraphQLTool):
    name = "create_staged_upload"
    description = "Create a staged upload target for file upload"
    input_schema = schema({
        "filename": string("Name of the file to upload"),
        "mimeType": string("MIME type of the file (e.g., 'image/jpeg', 'video/mp4')"),
        "resource": enum(RESOURCE_TYPES, "Type of resource"),
        "fileSize": integer("Size of the file in bytes"),
    }, required=["filename", "mimeType", "resource", "fileSize"])
    query = """
    mutation StagedUploadsCreate($input: [StagedUploadInput!]!) {
      stagedUploadsCreate(input: $input) {
        stagedTargets {
          url
          resourceUrl
          parameters {
            name
            value
          }
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        upload = pick(args, "filename", "mimeType", "resource")
        # the API takes the size as an unsigned 64 bit string
        upload["fileSize"] = str(args["fileSize"])
        return {"input": [upload]}

    def present(self, data: Any, args: Dict[str, Any]) -> Any:
        created = (data or {}).get("stagedUploadsCreate") or {}
        return {
            "stagedTargets": created.get("stagedTargets"),
            "userErrors": created.get("userErrors"),
            "note": UPLOAD_NOTE,
        }


class CreateFileTool(GraphQLTool):
    name = "create_file"
    description = "Create a file from a URL (after staged upload or external URL)"
    input_schema = schema({
        "originalSource": string("URL of the uploaded file"),
        "filename": string("Filename"),
        "mimeType": string("MIME type"),
        "contentType": enum(RESOURCE_TYPES, "Content type"),
        "alt": string("Alt text for accessibility"),
    }, required=["originalSource", "filename", "mimeType", "contentType"])
    query = """
    mutation FileCreate($files: [FileCreateInput!]!) {
      fileCreate(files: $files) {
        files {
          id
          alt
          createdAt
          filename
          mimeType
          fileStatus
          ... on MediaImage {
            image {
              id
              url
              altText
            }
          }
          ... on Video {
            sources {
              url
              mimeType
            }
          }
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"files": [pick(args, "originalSource", "filename", "mimeType", "contentType", "alt")]}


class UpdateFileTool(GraphQLTool):
    name = "update_file"
    description = "Update file metadata (alt text)"
    input_schema = schema({
        "id": string("File ID"),
        "alt": string("New alt text"),
    }, required=["id", "alt"])
    query = """
    mutation FileUpdate($input: FileInput!) {
      fileUpdate(input: $input) {
        file {
          id
          alt
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
        return {"input": pick(args, "id", "alt")}


class DeleteFileTool(GraphQLTool):
    name = "delete_file"
    description = "Delete a file"
    input_schema = schema({"id": string("File ID to delete")}, required=["id"])
    query = """
    mutation FileDelete($input: FileDeleteInput!) {
      fileDelete(input: $input) {
        deletedFileIds
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"input": {"id": args["id"]}}
