from pytest import fixture


class FakeLocalStorage:
    """In-memory stand-in for streamlit_local_storage.LocalStorage"""

    def __init__(self, items=None):
        self.items = dict(items or {})

    def getItem(self, key):
        return self.items.get(key)

    def setItem(self, key, value):
        self.items[key] = value


@fixture
def local_storage():
    return FakeLocalStorage()


@fixture
def mocked_requests(mocker):
    return mocker.patch("src.recipe_hub.api_client.requests.get")

