"""
Product tools
"""

from typing import Any, Dict

from ..base import (
    GraphQLTool, after_arg, array, enum, first_arg, id_arg, integer, obj,
    pick, query_arg, reverse_arg, schema, string,
)

PRODUCT_STATUSES = ["ACTIVE", "ARCHIVED", "DRAFT"]


class GetProductsTool(GraphQLTool):
    """List products with optional filtering"""

    name = "get_products"
    description = "Fetch products from the Shopify store with optional filtering"
    input_schema = schema({
        "first": first_arg("products"),
        "after": after_arg(),
        "query": query_arg("Filter query (e.g., 'title:shirt', 'product_type:clothing')"),
        "sortKey": enum(["TITLE", "VENDOR", "INVENTORY_TOTAL", "CREATED_AT", "UPDATED_AT", "ID"],
                        "Field to sort by"),
        "reverse": reverse_arg(),
    })
    defaults = {"first": 50, "sortKey": "CREATED_AT", "reverse": True}
    query = """
    query GetProducts($first: Int!, $after: String, $query: String, $sortKey: ProductSortKeys, $reverse: Boolean) {
      products(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse) {
        edges {
          node {
            id
            title
            handle
            descriptionHtml
            vendor
            productType
            createdAt
            updatedAt
            status
            totalInventory
            tags
            images(first: 5) {
              edges {
                node {
                  id
                  url
                  altText
                }
              }
            }
            variants(first: 10) {
              edges {
                node {
                  id
                  title
                  sku
                  price
                  inventoryQuantity
                  selectedOptions {
                    name
                    value
                  }
                }
              }
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


class GetProductTool(GraphQLTool):
    """Fetch one product with variants, collections and metafields"""

    name = "get_product"
    description = "Fetch a specific product by ID"
    input_schema = schema({"id": id_arg("Product")}, required=["id"])
    query = """
    query GetProduct($id: ID!) {
      product(id: $id) {
        id
        title
        handle
        descriptionHtml
        vendor
        productType
        createdAt
        updatedAt
        status
        totalInventory
        tags
        seo {
          title
          description
        }
        images(first: 20) {
          edges {
            node {
              id
              url
              altText
            }
          }
        }
        variants(first: 50) {
          edges {
            node {
              id
              title
              sku
              price
              compareAtPrice
              inventoryQuantity
              selectedOptions {
                name
                value
              }
              image {
                id
                url
                altText
              }
            }
          }
        }
        collections(first: 10) {
          edges {
            node {
              id
              title
              handle
            }
          }
        }
        metafields(first: 10) {
          edges {
            node {
              id
              namespace
              key
              value
              type
            }
          }
        }
      }
    }
    """


class CreateProductTool(GraphQLTool):
    """Create a product, optionally with variants"""

    name = "create_product"
    description = "Create a new product in the Shopify store"
    context = """
    New products are created as DRAFT unless a status is given.
    A variant's inventoryQuantity is stocked at locationId, which is then required.
    """
    input_schema = schema({
        "title": string("Product title"),
        "descriptionHtml": string("Product description (HTML)"),
        "vendor": string("Product vendor"),
        "productType": string("Product type/category"),
        "tags": array(string(), "Product tags"),
        "status": enum(PRODUCT_STATUSES, "Product status"),
        "variants": array(obj({
            "title": string("Variant title"),
            "price": string("Variant price"),
            "sku": string("Variant SKU"),
            "inventoryQuantity": integer("Inventory quantity"),
        }, required=["title", "price"]), "Product variants"),
        "locationId": id_arg("Location", "Location that receives the variants' inventoryQuantity"),
    }, required=["title"])
    defaults = {"status": "DRAFT"}
    query = """
    mutation ProductCreate($input: ProductInput!) {
      productCreate(input: $input) {
        product {
          id
          title
          handle
          descriptionHtml
          vendor
          productType
          status
          createdAt
          updatedAt
          tags
          variants(first: 10) {
            edges {
              node {
                id
                title
                sku
                price
                inventoryQuantity
              }
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
        product = pick(args, "title", "descriptionHtml", "vendor", "productType", "tags", "status")

        variants = []
        for variant in args.get("variants") or []:
            item = pick(variant, "title", "price", "sku")
            if variant.get("inventoryQuantity") is not None:
                if not args.get("locationId"):
                    raise ValueError("locationId is required when a variant sets inventoryQuantity")
                item["inventoryQuantities"] = [{
                    "availableQuantity": variant["inventoryQuantity"],
                    "locationId": args["locationId"],
                }]
            variants.append(item)
        if variants:
            product["variants"] = variants

        return {"input": product}


class UpdateProductTool(GraphQLTool):
    """Update product fields"""

    name = "update_product"
    description = "Update an existing product"
    input_schema = schema({
        "id": id_arg("Product"),
        "title": string("Product title"),
        "descriptionHtml": string("Product description (HTML)"),
        "vendor": string("Product vendor"),
        "productType": string("Product type/category"),
        "tags": array(string(), "Product tags"),
        "status": enum(PRODUCT_STATUSES, "Product status"),
    }, required=["id"])
    query = """
    mutation ProductUpdate($input: ProductInput!) {
      productUpdate(input: $input) {
        product {
          id
          title
          handle
          descriptionHtml
          vendor
          productType
          status
          updatedAt
          tags
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"input": pick(args, "id", "title", "descriptionHtml", "vendor", "productType", "tags", "status")}


class DeleteProductTool(GraphQLTool):
    name = "delete_product"
    description = "Delete a product from the store"
    input_schema = schema({"id": id_arg("Product")}, required=["id"])
    query = """
    mutation ProductDelete($input: ProductDeleteInput!) {
      productDelete(input: $input) {
        deletedProductId
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"input": {"id": args["id"]}}
