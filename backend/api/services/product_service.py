"""
Serviço de produtos: encapsula validação do corpo e operações no registro em memória.
Levanta exceções de domínio (ProductValidationError, ProductNotFound); o app as traduz em HTTP.
"""
from typing import Any, List, Optional
import logging

from backend.api.schemas.product_schema import Product, validate_product
from backend.store.product_registry import ProductRegistry


class ProductService:
    def __init__(self, registry: Optional[ProductRegistry] = None, logger=None):
        """
        Inicializa o serviço de produtos.
        Parâmetros:
            registry (ProductRegistry, opcional): registro dono dos produtos
            logger (logging.Logger, opcional): Logger para logs
        """
        self.registry = registry if registry is not None else ProductRegistry()
        if logger is None:
            logger = logging.getLogger("product_service")
            logger.setLevel(logging.INFO)
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
            if not logger.hasHandlers():
                logger.addHandler(handler)
        self.logger = logger

    def _validate(self, payload: Any) -> Product:
        self.logger.debug(f"Validando payload de produto: {payload}")
        result = validate_product(payload)
        if not result.ok:
            self.logger.warning(f"Payload de produto rejeitado: errors={[e.to_dict() for e in result.errors]}")
        return result.raise_for_errors()

    def create(self, payload: Any) -> str:
        """
        Valida e adiciona um produto ao fim do registro.
        Parâmetros:
            payload (dict): dados do produto
        Retorno:
            str: confirmação com o nome do produto
        """
        product = self._validate(payload)
        index = self.registry.append(product)
        self.logger.info(f"Produto criado: index={index}, name={product.name}")
        return f"Product {product.name} created successfully!"

    def list_all(self) -> List[Product]:
        products = self.registry.snapshot()
        self.logger.info(f"Listando produtos: total={len(products)}")
        return products

    def update_at(self, index: int, payload: Any) -> str:
        """
        Substitui o produto na posição informada, mantendo a posição.
        Parâmetros:
            index (int): posição do produto
            payload (dict): novos dados do produto
        Retorno:
            str: confirmação com o nome do novo produto
        """
        product = self._validate(payload)
        previous = self.registry.replace_at(index, product)
        self.logger.info(f"Produto atualizado: index={index}, antes={previous.name}, depois={product.name}")
        return f"Product {product.name} updated successfully!"

    def delete_at(self, index: int) -> str:
        """
        Remove o produto na posição informada; os seguintes descem uma posição.
        Parâmetros:
            index (int): posição do produto
        Retorno:
            str: confirmação com o nome do produto removido
        """
        removed = self.registry.remove_at(index)
        self.logger.info(f"Produto removido: index={index}, name={removed.name}")
        return f"Product {removed.name} deleted successfully!"
