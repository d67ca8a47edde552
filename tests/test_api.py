import asyncio
import os
import tempfile
import unittest
from unittest import mock

from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from autosales.config import get_settings
from autosales.database import get_db, init_db
from autosales import main
from autosales.main import app

ANA = {"name": "Ana", "document": "123", "phone": "555"}
UNO = {"brand": "Fiat", "model": "Uno", "year": 2010, "color": "Vermelho"}


def override_db_with(engine):
    session_factory = async_sessionmaker(engine, expire_on_commit=False)

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db


class RefusedSession:
    """Stands in for an AsyncSession whose connect is refused."""

    async def execute(self, *args, **kwargs):
        raise ConnectionRefusedError(111, "Connect call failed ('127.0.0.1', 5432)")

    async def commit(self):
        raise ConnectionRefusedError(111, "Connect call failed")

    async def rollback(self):
        pass


class APITestCase(unittest.TestCase):
    """Runs the app in-process against a throwaway SQLite file."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        path = os.path.join(self.tmpdir.name, "autosales.db")
        self.engine = create_async_engine(f"sqlite+aiosqlite:///{path}", poolclass=NullPool)
        asyncio.run(init_db(self.engine))
        override_db_with(self.engine)
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()
        asyncio.run(self.engine.dispose())
        self.tmpdir.cleanup()

    def use_unavailable_database(self):
        broken = create_async_engine(
            f"sqlite+aiosqlite:///{os.path.join(self.tmpdir.name, 'missing', 'autosales.db')}",
            poolclass=NullPool,
        )
        self.addCleanup(lambda: asyncio.run(broken.dispose()))
        override_db_with(broken)

    def use_refused_connection(self):
        """Sessions that fail the way asyncpg does when the server is down."""
        async def override_get_db():
            yield RefusedSession()

        app.dependency_overrides[get_db] = override_get_db


class TestCustomers(APITestCase):

    def test_create_customer(self):
        response = self.client.post("/customers", json=ANA)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"message": "Cliente cadastrado com sucesso!"})

        customers = self.client.get("/customers").json()
        self.assertEqual(len(customers), 1)
        self.assertEqual(customers[0]["name"], "Ana")
        self.assertEqual(customers[0]["document"], "123")
        self.assertEqual(customers[0]["phone"], "555")
        self.assertIsInstance(customers[0]["id"], int)

    def test_list_is_empty_array(self):
        response = self.client.get("/customers")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), [])

    def test_get_customer(self):
        self.client.post("/customers", json=ANA)
        customer_id = self.client.get("/customers").json()[0]["id"]

        response = self.client.get(f"/customers/{customer_id}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"id": customer_id, **ANA})

        response = self.client.get("/customers/9999")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"message": "Cliente não encontrado."})

    def test_remove_customer(self):
        self.client.post("/customers", json=ANA)
        customer_id = self.client.get("/customers").json()[0]["id"]

        response = self.client.delete(f"/customers/{customer_id}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"message": "Cliente removido com sucesso!"})
        self.assertEqual(self.client.get("/customers").json(), [])

    def test_remove_missing_customer(self):
        response = self.client.delete("/customers/9999")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.json(),
            {"message": "Não foi possível remover o cliente. Entre em contato com o administrador do sistema."},
        )

    def test_update_replaces_only_the_target(self):
        self.client.post("/customers", json=ANA)
        self.client.post("/customers", json={"name": "Bruno", "document": "456", "phone": "777"})
        first, second = self.client.get("/customers").json()

        response = self.client.put(
            f"/customers/{first['id']}",
            json={"name": "Ana Maria", "document": "123", "phone": "999"},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"message": "Cliente atualizado com sucesso!"})

        by_id = {c["id"]: c for c in self.client.get("/customers").json()}
        self.assertEqual(by_id[first["id"]]["name"], "Ana Maria")
        self.assertEqual(by_id[first["id"]]["phone"], "999")
        self.assertEqual(by_id[second["id"]], second)

    def test_update_missing_customer(self):
        response = self.client.put("/customers/9999", json=ANA)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.json()["message"],
            "Não foi possível atualizar o cliente. Entre em contato com o administrador do sistema.",
        )

    def test_list_with_database_unavailable(self):
        self.use_unavailable_database()
        response = self.client.get("/customers")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"message": "Não foi possível acessar a listagem de clientes."})

    def test_malformed_body(self):
        response = self.client.post("/customers", json={"name": "Ana"})
        self.assertEqual(response.status_code, 400)
        body = response.json()
        self.assertEqual(body["message"], "Dados inválidos na requisição.")
        self.assertTrue(body["detail"])
        self.assertEqual(self.client.get("/customers").json(), [])

    def test_non_integer_id(self):
        response = self.client.delete("/customers/abc")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "Dados inválidos na requisição.")


class TestCars(APITestCase):

    def test_car_lifecycle(self):
        response = self.client.post("/cars", json=UNO)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"message": "Carro cadastrado com sucesso!"})

        cars = self.client.get("/cars").json()
        self.assertEqual(len(cars), 1)
        car_id = cars[0]["id"]
        self.assertEqual(cars[0], {"id": car_id, **UNO})

        response = self.client.put(f"/cars/{car_id}", json={**UNO, "color": "Preto"})
        self.assertEqual(response.json(), {"message": "Carro atualizado com sucesso!"})
        self.assertEqual(self.client.get(f"/cars/{car_id}").json()["color"], "Preto")

        response = self.client.delete(f"/cars/{car_id}")
        self.assertEqual(response.json(), {"message": "Carro removido com sucesso!"})
        self.assertEqual(self.client.get("/cars").json(), [])

    def test_list_with_database_unavailable(self):
        self.use_unavailable_database()
        response = self.client.get("/cars")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"message": "Não foi possível acessar a listagem de carros."})


class TestSalesOrders(APITestCase):

    def test_sales_order_lifecycle(self):
        self.client.post("/customers", json=ANA)
        self.client.post("/cars", json=UNO)
        customer_id = self.client.get("/customers").json()[0]["id"]
        car_id = self.client.get("/cars").json()[0]["id"]

        order = {
            "car_id": car_id,
            "customer_id": customer_id,
            "order_date": "2024-05-10",
            "order_value": 32000.5,
        }
        response = self.client.post("/sales-orders", json=order)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"message": "Pedido cadastrado com sucesso!"})

        orders = self.client.get("/sales-orders").json()
        self.assertEqual(len(orders), 1)
        order_id = orders[0]["id"]
        self.assertEqual(orders[0], {"id": order_id, **order})

        response = self.client.put(f"/sales-orders/{order_id}", json={**order, "order_value": 30000})
        self.assertEqual(response.json(), {"message": "Pedido atualizado com sucesso!"})
        self.assertEqual(self.client.get(f"/sales-orders/{order_id}").json()["order_value"], 30000)

        response = self.client.delete(f"/sales-orders/{order_id}")
        self.assertEqual(response.json(), {"message": "Pedido removido com sucesso!"})

        response = self.client.delete(f"/sales-orders/{order_id}")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.json()["message"],
            "Não foi possível remover o pedido. Entre em contato com o administrador do sistema.",
        )

    def test_invalid_date(self):
        response = self.client.post(
            "/sales-orders",
            json={"car_id": 1, "customer_id": 1, "order_date": "yesterday", "order_value": 10},
        )
        self.assertEqual(response.status_code, 400)


class TestDistinctErrorStatus(APITestCase):

    def setUp(self):
        super().setUp()
        patcher = mock.patch.dict(os.environ, {"DISTINCT_ERROR_STATUS": "true"})
        patcher.start()
        get_settings.cache_clear()
        self.addCleanup(get_settings.cache_clear)
        self.addCleanup(patcher.stop)

    def test_not_found_is_404(self):
        response = self.client.delete("/customers/9999")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(
            response.json(),
            {"message": "Não foi possível remover o cliente. Entre em contato com o administrador do sistema."},
        )

    def test_unavailable_is_503(self):
        self.use_unavailable_database()
        response = self.client.get("/sales-orders")
        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json(), {"message": "Não foi possível acessar a listagem de pedidos."})

    def test_malformed_body_is_422(self):
        response = self.client.post("/cars", json={"brand": "Fiat"})
        self.assertEqual(response.status_code, 422)


class TestService(APITestCase):

    def test_root(self):
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["docs"], "/docs")

    def test_health(self):
        data = self.client.get("/health").json()
        self.assertEqual(data["status"], "healthy")
        self.assertEqual(data["database"], "online")

    def test_health_with_database_unavailable(self):
        self.use_unavailable_database()
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "unhealthy")
        self.assertEqual(response.json()["database"], "offline")


class TestRefusedConnection(APITestCase):
    """The asyncpg driver reports a down server as a bare OSError."""

    def setUp(self):
        super().setUp()
        self.use_refused_connection()

    def test_list_customers(self):
        response = self.client.get("/customers")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"message": "Não foi possível acessar a listagem de clientes."})

    def test_create_car(self):
        response = self.client.post("/cars", json=UNO)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.json()["message"],
            "Não foi possível cadastrar o carro. Entre em contato com o administrador do sistema.",
        )

    def test_remove_sales_order(self):
        response = self.client.delete("/sales-orders/1")
        self.assertEqual(response.status_code, 400)

    def test_health(self):
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "unhealthy")
        self.assertEqual(response.json()["database"], "offline")

    def test_distinct_status_is_503(self):
        with mock.patch.dict(os.environ, {"DISTINCT_ERROR_STATUS": "true"}):
            get_settings.cache_clear()
            try:
                response = self.client.get("/sales-orders")
            finally:
                get_settings.cache_clear()
        self.assertEqual(response.status_code, 503)

    def test_startup_survives_refused_connection(self):
        refused = mock.AsyncMock(side_effect=ConnectionRefusedError(111, "Connect call failed"))
        with mock.patch("autosales.main.init_db", refused), \
                mock.patch.object(main.settings, "create_tables", True):
            with TestClient(app) as client:
                response = client.get("/")
        refused.assert_awaited_once()
        self.assertEqual(response.status_code, 200)


if __name__ == "__main__":
    unittest.main()
