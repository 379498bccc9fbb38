import streamlit as st
import httpx
import asyncio
import os
from datetime import date
from typing import Any, Dict

from backend.utils.cpf_utils import CPFUtils

API_BASE = os.getenv("API_BASE", "http://api:3000")  # service name in docker network (docker compose network)

st.set_page_config(page_title="Products Console", page_icon="📦", layout="wide")

# -------------- Helpers --------------
async def fetch(client: httpx.AsyncClient, method: str, url: str, **kwargs):
    try:
        resp = await client.request(method, url, timeout=10, **kwargs)
        if resp.headers.get("content-type", "").startswith("application/json"):
            data = resp.json()
        else:
            data = resp.text
        return not resp.is_error, data, resp.status_code
    except httpx.HTTPError as e:
        return False, {"error": str(e)}, 0

async def list_products(client):
    return await fetch(client, "GET", f"{API_BASE}/products")

async def create_product(client, payload: Dict[str, Any]):
    return await fetch(client, "POST", f"{API_BASE}/products", json=payload)

async def update_product(client, index: int, payload: Dict[str, Any]):
    return await fetch(client, "PUT", f"{API_BASE}/products/{index}", json=payload)

async def delete_product(client, index: int):
    return await fetch(client, "DELETE", f"{API_BASE}/products/{index}")

def show_failure(data: Any, status: int):
    if status == 400 and isinstance(data, dict):
        for err in data.get("detail", []):
            st.error(f"{err.get('field')}: {err.get('message')}")
    elif status == 404:
        st.warning(data)
    else:
        st.error(f"Erro ({status}): {data}")

def product_form(prefix: str, initial: Dict[str, Any]) -> Dict[str, Any]:
    """Campos do produto; devolve o payload no formato da API."""
    c1, c2, c3 = st.columns(3)
    with c1:
        name = st.text_input("Nome", value=initial.get("name", ""), key=f"{prefix}_name")
        model = st.text_input("Modelo", value=initial.get("model", ""), key=f"{prefix}_model")
    with c2:
        brand = st.text_input("Marca", value=initial.get("brand", ""), key=f"{prefix}_brand")
        year = st.number_input("Ano", min_value=0, max_value=9999, value=int(initial.get("year", date.today().year)), key=f"{prefix}_year")
    with c3:
        made = st.date_input("Data de fabricação", value=date.fromisoformat(initial.get("dateManufacture", date.today().isoformat())), key=f"{prefix}_date")
        cpf = st.text_input("CPF (somente números)", value=initial.get("cpf", ""), key=f"{prefix}_cpf")
    # Pré-validação local; a API continua sendo a autoridade
    if cpf and not CPFUtils.is_valid_cpf(cpf):
        st.caption("⚠️ CPF não passa nos dígitos verificadores")
    return {"name": name, "model": model, "dateManufacture": made.isoformat(), "year": int(year), "brand": brand, "cpf": cpf}

# -------------- UI Sections --------------
st.title("📦 Products Console")
st.caption("Interface simples em Streamlit para explorar a API de produtos (registro em memória)")

async def main_ui():
    async with httpx.AsyncClient() as client:
        tabs = st.tabs(["Produtos", "Novo Produto", "Validar CPF", "Sobre"])

        # ---- Tab Produtos ----
        with tabs[0]:
            st.subheader("Produtos Cadastrados")
            st.caption("O ID é a posição na lista; remover um produto desloca os seguintes.")
            ok, products, status = await list_products(client)
            if not ok:
                st.error(f"Falha ao listar produtos ({status}): {products}")
            elif not products:
                st.info("Nenhum produto cadastrado ainda.")
            else:
                for index, p in enumerate(products):
                    with st.expander(f"#{index} {p.get('name')} - {p.get('brand')} {p.get('model')} ({p.get('year')})"):
                        st.json(p)
                        payload = product_form(f"edit_{index}", p)
                        btn_col1, btn_col2 = st.columns([1, 3])
                        with btn_col1:
                            if st.button("Salvar", key=f"save_{index}"):
                                uok, udata, ustatus = await update_product(client, index, payload)
                                if uok:
                                    st.success(udata)
                                    st.rerun()
                                else:
                                    show_failure(udata, ustatus)
                        with btn_col2:
                            if st.button("Excluir", key=f"del_{index}"):
                                dok, ddata, dstatus = await delete_product(client, index)
                                if dok:
                                    st.warning(ddata)
                                    st.rerun()
                                else:
                                    show_failure(ddata, dstatus)

        # ---- Tab Novo Produto ----
        with tabs[1]:
            st.subheader("Cadastrar Produto")
            payload = product_form("new", {})
            if st.button("Criar Produto", type="primary"):
                ok, data, status = await create_product(client, payload)
                if ok:
                    st.success(data)
                else:
                    show_failure(data, status)

        # ---- Tab CPF ----
        with tabs[2]:
            st.subheader("Validar CPF")
            raw = st.text_input("CPF (aceita pontuação)", key="cpf_check")
            if raw:
                digits = CPFUtils.normalize_cpf(raw)
                if CPFUtils.is_valid_cpf(raw):
                    st.success(f"{digits} é um CPF válido")
                else:
                    st.error(f"{digits or raw} não é um CPF válido")

        # ---- Tab Sobre ----
        with tabs[3]:
            st.subheader("Sobre o Projeto")
            st.markdown(
                """
                **Products Console** – Interface de apoio para a API.
                - CRUD de produtos por posição (criar, listar, atualizar, remover)
                - Validação de CPF por dígitos verificadores (módulo 11)
                - Dados apenas em memória: reiniciar a API apaga tudo
                """
            )
            st.caption("Construído com Streamlit + httpx (async)")

asyncio.run(main_ui())
