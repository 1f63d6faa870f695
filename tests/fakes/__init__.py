from tests.fakes.fake_connections import DAY, NOW, STALE, make_connection
from tests.fakes.fake_link_index import FakeLinkIndex
from tests.fakes.fake_text_reader import FakeTextReader

__all__ = ["DAY", "NOW", "STALE", "FakeLinkIndex", "FakeTextReader", "make_connection"]
