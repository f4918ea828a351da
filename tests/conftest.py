import pytest


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def celery_app():
    """Celery app running tasks synchronously in the test process."""
    from config.celery import app

    # Registers the shared tasks without a worker's autodiscovery.
    import modules.core.tasks  # noqa: F401
    import modules.products.tasks  # noqa: F401

    previous = (app.conf.task_always_eager, app.conf.task_eager_propagates)
    app.conf.task_always_eager = True
    app.conf.task_eager_propagates = True
    yield app
    app.conf.task_always_eager, app.conf.task_eager_propagates = previous


@pytest.fixture()
def products_client(celery_app):
    """ProductsClient wired to the eager Celery app."""
    from modules.products.client import ProductsClient

    return ProductsClient(app=celery_app, timeout=5)
