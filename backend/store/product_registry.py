from typing import List
import threading

from backend.api.schemas.product_schema import Product


# ====== Registro em memória (não persistido) ======
class ProductNotFound(Exception):
	def __init__(self, index: int):
		self.index = index
		super().__init__(f"Nenhum produto na posição {index}")


class ProductRegistry:
	"""Sequência ordenada de produtos; a posição é o único identificador."""

	def __init__(self) -> None:
		self._products: List[Product] = []
		self._lock = threading.Lock()

	def __len__(self) -> int:
		with self._lock:
			return len(self._products)

	def _check_index(self, index: int) -> None:
		# índices negativos não são endereços válidos
		if index < 0 or index >= len(self._products):
			raise ProductNotFound(index)

	def append(self, product: Product) -> int:
		with self._lock:
			self._products.append(product)
			return len(self._products) - 1

	def snapshot(self) -> List[Product]:
		with self._lock:
			return list(self._products)

	def replace_at(self, index: int, product: Product) -> Product:
		with self._lock:
			self._check_index(index)
			previous = self._products[index]
			self._products[index] = product
			return previous

	def remove_at(self, index: int) -> Product:
		with self._lock:
			self._check_index(index)
			return self._products.pop(index)
