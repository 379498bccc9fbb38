
from typing import Any, List, Optional
from fastapi import FastAPI, status, Depends, Body, Request
from fastapi.responses import JSONResponse, PlainTextResponse
import logging
import uvicorn
import os
from backend.api.schemas.product_schema import ProductValidationError
from backend.api.services.product_service import ProductService
from backend.store.product_registry import ProductNotFound

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

NOT_FOUND_MESSAGE = "Product not found!"

logger = logging.getLogger(__name__)


def get_product_service(request: Request) -> ProductService:
    return request.app.state.product_service


def create_app(service: Optional[ProductService] = None) -> FastAPI:
    """
    Monta a aplicação FastAPI com o serviço (e o registro) que ela possui.
    Parâmetros:
        service (ProductService, opcional): serviço a usar; um novo, vazio, se omitido
    Retorno:
        FastAPI: aplicação pronta para o uvicorn
    """
    app = FastAPI(title="Products API", version="1.0.0")
    app.state.product_service = service if service is not None else ProductService()

    @app.on_event("startup")
    async def on_startup() -> None:
        logger.info("Iniciando evento de startup da API (registro de produtos em memória)")

    @app.on_event("shutdown")
    async def on_shutdown() -> None:
        total = len(app.state.product_service.registry)
        logger.info(f"Encerrando API; {total} produtos em memória descartados")

    # Erros de domínio recuperados na borda HTTP
    @app.exception_handler(ProductValidationError)
    async def on_validation_error(request: Request, exc: ProductValidationError) -> JSONResponse:
        logger.warning(f"Validação falhou: {request.method} {request.url.path} errors={exc}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": [e.to_dict() for e in exc.errors]},
        )

    @app.exception_handler(ProductNotFound)
    async def on_not_found(request: Request, exc: ProductNotFound) -> PlainTextResponse:
        logger.warning(f"Produto não encontrado: {request.method} {request.url.path} index={exc.index}")
        return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=status.HTTP_404_NOT_FOUND)

    @app.get("/")
    async def root(service: ProductService = Depends(get_product_service)) -> dict:
        """
        Endpoint de status da API.
        Retorno:
            dict: status e total de produtos
        """
        return {"status": "ok", "products": len(service.registry)}

    #########
    @app.post("/products", status_code=status.HTTP_201_CREATED, response_class=PlainTextResponse)
    async def create_product(payload: Any = Body(None), service: ProductService = Depends(get_product_service)) -> str:
        """
        Cria um novo produto no fim do registro.
        Parâmetros:
            payload (dict): dados do produto
        Retorno:
            str: mensagem de confirmação
        """
        logger.info(f"Recebendo payload para criação de produto: {payload}")
        return service.create(payload)

    #########
    @app.get("/products")
    async def list_products(service: ProductService = Depends(get_product_service)) -> List[dict]:
        return [p.to_dict() for p in service.list_all()]

    #########
    @app.put("/products/{product_id}", response_class=PlainTextResponse)
    async def update_product(product_id: int, payload: Any = Body(None), service: ProductService = Depends(get_product_service)) -> str:
        """
        Substitui o produto na posição product_id.
        Parâmetros:
            product_id (int): posição do produto no registro
            payload (dict): novos dados do produto
        Retorno:
            str: mensagem de confirmação
        """
        logger.info(f"Solicitação de atualização: product_id={product_id}")
        return service.update_at(product_id, payload)

    #########
    @app.delete("/products/{product_id}", response_class=PlainTextResponse)
    async def delete_product(product_id: int, service: ProductService = Depends(get_product_service)) -> str:
        """
        Remove o produto na posição product_id.
        Parâmetros:
            product_id (int): posição do produto no registro
        Retorno:
            str: mensagem de confirmação
        """
        logger.info(f"Solicitação de remoção: product_id={product_id}")
        return service.delete_at(product_id)

    return app


app = create_app()


######### ------------------------------ #########
if __name__ == "__main__":
    """
    Inicializa o servidor Uvicorn para rodar a API.
    """
    logging.basicConfig(level=LOG_LEVEL)
    logger.info(f"Starting Uvicorn server on {API_HOST}:{API_PORT}")
    uvicorn.run(app, host=API_HOST, port=API_PORT)
