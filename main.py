# main.py

import uvicorn
from fastapi import FastAPI, Request, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from cotacao.core.config import settings
from cotacao.core.logging import setup_logging
from cotacao.services.store import QuotationStore

from cotacao.api.quotation import router as quotation_router

setup_logging(settings.LOG_LEVEL)

app = FastAPI(
    title="Cotação USD-BRL API",
    version="0.1.0",
    # "/cotacao/" é outra rota: 404, sem redirecionar
    redirect_slashes=False,
)


@app.on_event("startup")
def on_startup():
    store = QuotationStore.open(settings.DATABASE_PATH)
    store.ensure_schema()
    app.state.store = store


@app.on_event("shutdown")
def on_shutdown():
    store = getattr(app.state, "store", None)
    if store is not None:
        store.close()


# Erros HTTP (404, 405...) saem sem corpo
@app.exception_handler(StarletteHTTPException)
async def empty_http_exception_handler(request: Request, exc: StarletteHTTPException):
    return Response(status_code=exc.status_code, headers=getattr(exc, "headers", None))


app.include_router(quotation_router)


def run():
    uvicorn.run(app, host=settings.SERVER_HOST, port=settings.SERVER_PORT)


if __name__ == "__main__":
    run()
