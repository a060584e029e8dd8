"""
상품 카탈로그 API Locust 부하 테스트

테스트 시나리오:
1. 조회 위주 사용자: 목록/필터/단건 조회
2. 관리자: 상품 추가 → 조회 → 수정 → 삭제 (변경마다 JSON 파일 전체 재작성)

검증 항목:
- 동시 변경 중 추가한 상품이 바로 조회되는지 (유실 여부)
"""

import random

from locust import HttpUser, TaskSet, task, between, events


# 전역 메트릭 수집
lost_writes = 0
created_products = 0


class CatalogTaskSet(TaskSet):
    """상품 카탈로그 사용자 행동 모델"""

    def on_start(self):
        """각 사용자가 시작할 때 실행: 회원가입 및 로그인"""
        self.username = f"loadtest_user_{random.randint(1, 1000000)}"
        self.access_token: str | None = None
        self.product_ids: list[int] = []

        self._register()
        self._login()

    def _register(self):
        """회원가입"""
        with self.client.post(
            "/v1/users/register",
            json={
                "username": self.username,
                "password": "test1234",
                "email": f"{self.username}@loadtest.com",
            },
            name="[Auth] Register",
            catch_response=True,
        ) as response:
            if response.status_code in (201, 409):
                # 409: 이미 존재하는 사용자 (재시작 시)
                response.success()
            else:
                response.failure(f"Registration failed: {response.status_code}")

    def _login(self):
        """로그인 및 토큰 획득"""
        with self.client.post(
            "/v1/users/login",
            json={"username": self.username, "password": "test1234"},
            name="[Auth] Login",
            catch_response=True,
        ) as response:
            if response.status_code == 200:
                self.access_token = response.json().get("access_token")
                response.success()
            else:
                response.failure(f"Login failed: {response.status_code}")

    def _get_headers(self) -> dict[str, str]:
        """인증 헤더 반환"""
        if not self.access_token:
            return {}
        return {"Authorization": f"Bearer {self.access_token}"}

    @task(5)
    def list_products(self):
        """상품 목록 조회 (가장 빈번한 작업)"""
        with self.client.get(
            "/v1/products",
            headers=self._get_headers(),
            name="[Product] List Products",
            catch_response=True,
        ) as response:
            if response.status_code == 200:
                self.product_ids = [p["id"] for p in response.json()]
                response.success()
            else:
                response.failure(f"List products failed: {response.status_code}")

    @task(3)
    def filter_products(self):
        """가격 범위 필터 조회"""
        low = random.randint(0, 100)
        with self.client.get(
            "/v1/products",
            params={"minPrice": low, "maxPrice": low + 50},
            headers=self._get_headers(),
            name="[Product] Filter Products",
            catch_response=True,
        ) as response:
            if response.status_code == 200:
                response.success()
            else:
                response.failure(f"Filter failed: {response.status_code}")

    @task(3)
    def get_product(self):
        """단건 조회"""
        if not self.product_ids:
            return

        with self.client.get(
            f"/v1/products/{random.choice(self.product_ids)}",
            headers=self._get_headers(),
            name="[Product] Get Product",
            catch_response=True,
        ) as response:
            # 다른 사용자가 삭제했을 수 있으므로 404도 정상
            if response.status_code in (200, 404):
                response.success()
            else:
                response.failure(f"Get product failed: {response.status_code}")


class AdminTaskSet(CatalogTaskSet):
    """상품 변경까지 수행하는 관리자 행동 모델"""

    @task(2)
    def create_update_delete(self):
        """상품 추가 → 조회 → 수정 → 삭제"""
        global lost_writes, created_products

        product_id = random.randint(100000, 999999)
        headers = self._get_headers()

        response = self.client.post(
            "/v1/products",
            json={
                "id": product_id,
                "title": f"Load test product {product_id}",
                "price": round(random.uniform(1, 200), 2),
                "description": "Created by locust",
                "category": "load-test",
                "image": "http://example.com/load.jpg",
                "rating": {"rate": 4.0, "count": random.randint(1, 500)},
            },
            headers=headers,
            name="[Product] Create Product",
        )
        if response.status_code != 201:
            return
        created_products += 1

        with self.client.get(
            f"/v1/products/{product_id}",
            headers=headers,
            name="[Product] Get Created Product",
            catch_response=True,
        ) as check:
            if check.status_code == 404:
                lost_writes += 1
                check.failure("Created product is missing! Lost write detected")
            else:
                check.success()

        self.client.put(
            f"/v1/products/{product_id}",
            json={"price": 10},
            headers=headers,
            name="[Product] Update Product",
        )
        self.client.delete(
            f"/v1/products/{product_id}",
            headers=headers,
            name="[Product] Delete Product",
        )


class Browser(HttpUser):
    """일반 사용자 (조회만 수행)"""

    tasks = [CatalogTaskSet]
    wait_time = between(1, 3)
    host = "http://localhost:8000"


class Admin(HttpUser):
    """관리자 (상품 변경 포함)"""

    tasks = [AdminTaskSet]
    wait_time = between(0.5, 1.5)
    host = "http://localhost:8000"


@events.test_start.add_listener
def on_test_start(environment, **kwargs):
    """테스트 시작 시 초기화"""
    global lost_writes, created_products
    lost_writes = 0
    created_products = 0

    print("\n" + "=" * 60)
    print("🚀 Catalog Load Test Started")
    print(f"Target: {environment.host}")
    print("=" * 60 + "\n")


@events.test_stop.add_listener
def on_test_stop(environment, **kwargs):
    """테스트 종료 시 결과 출력"""
    print("\n" + "=" * 60)
    print("📊 Test Results Summary")
    print("=" * 60)
    print(f"✅ Created Products: {created_products}")
    print(f"🚨 Lost Writes Detected: {lost_writes}")
    if lost_writes > 0:
        print("❌ FAIL: Concurrent writes lost products.")
    else:
        print("✅ PASS: Every created product was readable.")
    print("=" * 60 + "\n")


"""
기본 실행 (웹 UI):
    locust -f load_tests/locustfile.py --host=http://localhost:8000

헤드리스 모드 (CLI):
    locust -f load_tests/locustfile.py --headless --users 50 --spawn-rate 10 -t 60s --host=http://localhost:8000
"""
