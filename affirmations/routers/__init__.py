import importlib
import logging
import pkgutil
from typing import List

from fastapi import FastAPI, APIRouter

logger = logging.getLogger(__name__)


def discover_routers() -> List[APIRouter]:
    """Collect the ``router`` attribute of every plain module in this package, by module name."""
    package = importlib.import_module(__name__)
    routers: List[APIRouter] = []

    for module_info in sorted(pkgutil.iter_modules(package.__path__), key=lambda info: info.name):
        if module_info.ispkg:
            continue

        module = importlib.import_module(f"{__name__}.{module_info.name}")
        router = getattr(module, "router", None)

        if isinstance(router, APIRouter):
            routers.append(router)

    return routers


def register_routers(app: FastAPI) -> None:
    for router in discover_routers():
        app.include_router(router)
        logger.debug("Mounted router %s", router.prefix or "/")
