from carpool.shared.infrastructure.cache import InMemoryCacheService


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class TestInMemoryCacheService:
    """InMemoryCacheService のテスト"""

    def test_entry_expires_after_ttl(self):
        """TTL を過ぎた値は返さない"""

        # Arrange
        clock = FakeClock()
        cache = InMemoryCacheService(clock=clock)
        cache.set("carpool:brand:find_all:[]", "[]", 10)

        # Act
        before = cache.get("carpool:brand:find_all:[]")
        clock.now = 10.0
        after = cache.get("carpool:brand:find_all:[]")

        # Assert
        assert before == "[]"
        assert after is None

    def test_delete_by_pattern_only_removes_matching_domain(self):
        """パターンに一致するドメインのキーのみ削除する"""

        # Arrange
        cache = InMemoryCacheService()
        cache.set('carpool:travel:find_by_id:["a"]', "{}", 60)
        cache.set("carpool:travel:find_all:[null]", "{}", 60)
        cache.set('carpool:inscription:find_by_id:["b"]', "{}", 60)

        # Act
        cache.delete_by_pattern("carpool:travel:*")

        # Assert
        assert cache.keys() == ['carpool:inscription:find_by_id:["b"]']

    def test_set_sweeps_expired_entries_that_are_never_read(self):
        """一度も読まれない期限切れのキーも、sweep_interval 経過後の set で削除される"""

        # Arrange
        clock = FakeClock()
        cache = InMemoryCacheService(clock=clock, sweep_interval=30)
        cache.set('carpool:user:find_by_id:["a"]', "{}", 10)
        cache.set('carpool:user:find_by_id:["b"]', "{}", 120)

        # Act
        clock.now = 20.0
        cache.set("carpool:color:find_all:[null]", "[]", 10)
        before_sweep = cache.keys()
        clock.now = 30.0
        cache.set("carpool:brand:find_all:[null]", "[]", 10)

        # Assert
        assert 'carpool:user:find_by_id:["a"]' in before_sweep
        assert cache.keys() == [
            'carpool:user:find_by_id:["b"]',
            "carpool:brand:find_all:[null]",
        ]
