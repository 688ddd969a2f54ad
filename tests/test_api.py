"""
API tests

Drive the HTTP surface the storefront page uses and check status codes,
camelCase payloads and error bodies.
"""
from httpx import AsyncClient

SESSION = "session_k2j4h5g6f"


class TestCategoryEndpoints:

    async def test_list_categories_with_products(self, client: AsyncClient, catalog):
        response = await client.get("/api/categories")

        assert response.status_code == 200
        data = response.json()
        assert [c["name"] for c in data] == ["Books", "Clothing", "Home & Garden"]
        clothing = data[1]
        assert [p["name"] for p in clothing["products"]] == ["Men's T-Shirt", "Women's Jeans"]
        assert clothing["products"][0]["categoryId"] == catalog.clothing

    async def test_get_category(self, client: AsyncClient, catalog):
        response = await client.get(f"/api/categories/{catalog.garden}")

        assert response.status_code == 200
        assert response.json()["products"] == []

    async def test_get_missing_category(self, client: AsyncClient, catalog):
        response = await client.get("/api/categories/9999")

        assert response.status_code == 404
        body = response.json()
        assert body["detail"] == "Category with ID 9999 not found"
        assert body["error_code"] == "NOT_FOUND"
        assert response.headers["X-Request-ID"] == body["request_id"]

    async def test_create_category_returns_location(self, client: AsyncClient):
        response = await client.post(
            "/api/categories", json={"name": "Toys", "description": "Games and toys"}
        )

        assert response.status_code == 201
        created = response.json()
        assert response.headers["Location"].endswith(f"/api/categories/{created['id']}")

        fetched = await client.get(response.headers["Location"])
        assert fetched.json()["name"] == "Toys"

    async def test_create_category_requires_name(self, client: AsyncClient):
        response = await client.post("/api/categories", json={"name": "", "description": "x"})

        assert response.status_code == 422

    async def test_update_category(self, client: AsyncClient, catalog):
        response = await client.put(
            f"/api/categories/{catalog.garden}", json={"name": "Garden", "description": "Outdoors"}
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Garden"

        missing = await client.put("/api/categories/9999", json={"name": "Garden"})
        assert missing.status_code == 404

    async def test_delete_category_cascades(self, client: AsyncClient, catalog):
        await client.post("/api/cart", json={"productId": catalog.clean_code, "quantity": 1, "sessionId": SESSION})

        response = await client.delete(f"/api/categories/{catalog.books}")

        assert response.status_code == 200
        assert response.json() == {"message": "Category 'Books' deleted successfully"}
        assert (await client.get(f"/api/products/{catalog.clean_code}")).status_code == 404
        assert (await client.get(f"/api/products/category/{catalog.books}")).json() == []
        cart = (await client.get(f"/api/cart/{SESSION}")).json()
        assert cart["items"] == []

        again = await client.delete(f"/api/categories/{catalog.books}")
        assert again.status_code == 404


class TestProductEndpoints:

    async def test_list_products_sorted_by_name(self, client: AsyncClient, catalog):
        response = await client.get("/api/products")

        assert response.status_code == 200
        data = response.json()
        assert [p["name"] for p in data][:2] == ["Clean Code", "Men's T-Shirt"]
        first = data[0]
        assert first["price"] == 32.99
        assert first["category"]["name"] == "Books"
        assert "imageUrl" in first and "createdAt" in first

    async def test_get_product(self, client: AsyncClient, catalog):
        response = await client.get(f"/api/products/{catalog.jeans}")

        assert response.status_code == 200
        assert response.json()["stock"] == 60
        assert (await client.get("/api/products/9999")).status_code == 404

    async def test_search(self, client: AsyncClient, catalog):
        response = await client.get("/api/products/search", params={"query": "jEaNs"})

        assert response.status_code == 200
        assert [p["name"] for p in response.json()] == ["Women's Jeans"]

    async def test_empty_search_lists_everything(self, client: AsyncClient, catalog):
        everything = (await client.get("/api/products")).json()

        assert (await client.get("/api/products/search", params={"query": "  "})).json() == everything
        assert (await client.get("/api/products/search")).json() == everything

    async def test_create_product(self, client: AsyncClient, catalog):
        payload = {
            "name": "Garden Hose",
            "description": "15m hose",
            "price": 12.5,
            "imageUrl": "https://img.example/hose.png",
            "stock": 8,
            "categoryId": catalog.garden,
        }

        response = await client.post("/api/products", json=payload)

        assert response.status_code == 201
        data = response.json()
        assert data["price"] == 12.5
        assert data["category"]["name"] == "Home & Garden"
        assert response.headers["Location"].endswith(f"/api/products/{data['id']}")

    async def test_create_product_unknown_category(self, client: AsyncClient, catalog):
        payload = {"name": "Orphan", "price": 1, "stock": 1, "categoryId": 9999}

        response = await client.post("/api/products", json=payload)

        assert response.status_code == 400
        assert response.json()["error_code"] == "REFERENTIAL_VIOLATION"

    async def test_update_product(self, client: AsyncClient, catalog):
        payload = {"name": "Jeans", "description": "", "price": 45, "imageUrl": "",
                   "stock": 10, "categoryId": catalog.clothing}

        response = await client.put(f"/api/products/{catalog.jeans}", json=payload)

        assert response.status_code == 200
        assert response.json()["name"] == "Jeans"
        assert response.json()["price"] == 45.0

        assert (await client.put("/api/products/9999", json=payload)).status_code == 404
        payload["categoryId"] = 9999
        assert (await client.put(f"/api/products/{catalog.jeans}", json=payload)).status_code == 400

    async def test_delete_product(self, client: AsyncClient, catalog):
        response = await client.delete(f"/api/products/{catalog.tshirt}")

        assert response.status_code == 200
        assert response.json() == {"message": "Product 'Men's T-Shirt' deleted successfully"}
        assert (await client.delete(f"/api/products/{catalog.tshirt}")).status_code == 404

    async def test_patch_stock_with_bare_integer(self, client: AsyncClient, catalog):
        response = await client.patch(f"/api/products/{catalog.rare}/stock", json=7)

        assert response.status_code == 200
        assert response.json() == {"productId": catalog.rare, "newStock": 7}

    async def test_patch_stock_errors(self, client: AsyncClient, catalog):
        negative = await client.patch(f"/api/products/{catalog.rare}/stock", json=-1)
        missing = await client.patch("/api/products/9999/stock", json=5)

        assert negative.status_code == 400
        assert negative.json()["detail"] == "Stock cannot be negative"
        assert missing.status_code == 404


class TestCartEndpoints:

    async def add(self, client, product_id, quantity=1, session_id=SESSION):
        return await client.post(
            "/api/cart", json={"productId": product_id, "quantity": quantity, "sessionId": session_id}
        )

    async def test_empty_cart(self, client: AsyncClient):
        response = await client.get("/api/cart/session_new")

        assert response.status_code == 200
        assert response.json() == {"items": [], "totalItems": 0, "totalPrice": 0.0}

    async def test_add_and_summarize(self, client: AsyncClient, catalog):
        first = await self.add(client, catalog.tshirt, 2)
        await self.add(client, catalog.clean_code, 1)

        assert first.status_code == 200
        assert first.json() == {"message": "Product added to cart successfully"}

        cart = (await client.get(f"/api/cart/{SESSION}")).json()
        assert cart["totalItems"] == 3
        assert cart["totalPrice"] == 72.97
        item = cart["items"][0]
        assert item["productId"] == catalog.tshirt
        assert item["sessionId"] == SESSION
        assert item["product"]["category"]["name"] == "Clothing"

    async def test_add_defaults_to_one(self, client: AsyncClient, catalog):
        response = await client.post("/api/cart", json={"productId": catalog.jeans, "sessionId": SESSION})

        assert response.status_code == 200
        assert (await client.get(f"/api/cart/{SESSION}")).json()["totalItems"] == 1

    async def test_add_merges_and_respects_stock(self, client: AsyncClient, catalog):
        await self.add(client, catalog.rare, 2)

        rejected = await self.add(client, catalog.rare, 2)

        assert rejected.status_code == 400
        assert rejected.json()["detail"] == "Not enough stock. Only 3 items available"
        assert rejected.json()["error_code"] == "INSUFFICIENT_STOCK"
        cart = (await client.get(f"/api/cart/{SESSION}")).json()
        assert [i["quantity"] for i in cart["items"]] == [2]

    async def test_add_huge_product(self, client: AsyncClient, catalog):
        response = await self.add(client, 9999)

        assert response.status_code == 404

    async def test_add_zero_quantity(self, client: AsyncClient, catalog):
        response = await self.add(client, catalog.tshirt, 0)

        assert response.status_code == 400
        assert response.json()["error_code"] == "INVALID_ARGUMENT"

    async def test_update_item(self, client: AsyncClient, catalog):
        await self.add(client, catalog.pragmatic, 1)
        item_id = (await client.get(f"/api/cart/{SESSION}")).json()["items"][0]["id"]

        ok = await client.put(f"/api/cart/{item_id}", json={"quantity": 5})
        too_many = await client.put(f"/api/cart/{item_id}", json={"quantity": 21})
        zero = await client.put(f"/api/cart/{item_id}", json={"quantity": 0})
        missing = await client.put("/api/cart/9999", json={"quantity": 1})

        assert ok.status_code == 200
        assert ok.json() == {"message": "Cart updated successfully"}
        assert too_many.status_code == 400
        assert zero.status_code == 400
        assert missing.status_code == 404
        cart = (await client.get(f"/api/cart/{SESSION}")).json()
        assert cart["items"][0]["quantity"] == 5

    async def test_remove_item(self, client: AsyncClient, catalog):
        await self.add(client, catalog.pragmatic, 1)
        item_id = (await client.get(f"/api/cart/{SESSION}")).json()["items"][0]["id"]

        response = await client.delete(f"/api/cart/{item_id}")

        assert response.status_code == 200
        assert response.json() == {"message": "Item removed from cart successfully"}
        assert (await client.delete(f"/api/cart/{item_id}")).status_code == 404

    async def test_clear_cart(self, client: AsyncClient, catalog):
        await self.add(client, catalog.pragmatic, 1)
        await self.add(client, catalog.jeans, 3)
        await self.add(client, catalog.jeans, 1, session_id="session_other")

        response = await client.delete(f"/api/cart/clear/{SESSION}")

        assert response.status_code == 200
        assert response.json() == {"message": "Cart cleared successfully"}
        assert (await client.get(f"/api/cart/{SESSION}")).json()["totalItems"] == 0
        assert (await client.get("/api/cart/session_other")).json()["totalItems"] == 1

        empty = await client.delete("/api/cart/clear/session_never_used")
        assert empty.status_code == 200


class TestServiceEndpoints:

    async def test_health(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    async def test_root(self, client: AsyncClient):
        response = await client.get("/")

        assert response.json()["docs"] == "/api/docs"


class TestIdBounds:
    """Ids and counts beyond the Integer column range are rejected before the database"""

    HUGE = 99999999999999999999

    async def test_oversized_path_ids(self, client: AsyncClient, catalog):
        responses = [
            await client.get(f"/api/products/{self.HUGE}"),
            await client.get(f"/api/products/category/{self.HUGE}"),
            await client.get(f"/api/categories/{self.HUGE}"),
            await client.delete(f"/api/cart/{self.HUGE}"),
            await client.put(f"/api/cart/{self.HUGE}", json={"quantity": 1}),
            await client.patch(f"/api/products/{self.HUGE}/stock", json=1),
        ]

        assert [r.status_code for r in responses] == [422] * len(responses)

    async def test_oversized_body_values(self, client: AsyncClient, catalog):
        huge_product = await client.post(
            "/api/cart", json={"productId": self.HUGE, "quantity": 1, "sessionId": SESSION}
        )
        huge_quantity = await client.post(
            "/api/cart", json={"productId": catalog.tshirt, "quantity": self.HUGE, "sessionId": SESSION}
        )
        huge_stock = await client.patch(f"/api/products/{catalog.rare}/stock", json=self.HUGE)
        huge_category = await client.post(
            "/api/products", json={"name": "x", "price": 1, "stock": 1, "categoryId": self.HUGE}
        )

        assert huge_product.status_code == 422
        assert huge_quantity.status_code == 422
        assert huge_stock.status_code == 422
        assert huge_category.status_code == 422
        assert (await client.get(f"/api/cart/{SESSION}")).json()["items"] == []

    async def test_in_range_missing_ids_are_not_found(self, client: AsyncClient, catalog):
        for product_id in (2**31 - 1, 0, -1):
            response = await client.get(f"/api/products/{product_id}")
            assert response.status_code == 404

        assert (await client.delete(f"/api/cart/{2**31 - 1}")).status_code == 404
