from fastapi import APIRouter, Depends, HTTPException, Response
from fastapi.responses import JSONResponse

from products_api.api.deps import get_product_repo, parse_product_id
from products_api.repositories.product_repo import ProductRepository, ProductStoreError
from products_api.schemas.product_schema import ProductIn, ProductOut
from products_api.services.product_validator import validate_product
from products_api.utils.logs import get_logger

router = APIRouter(tags=["products"])

log = get_logger("products.api")


def _store_error():
    return HTTPException(status_code=500, detail="DB error")


def _invalid(errors):
    log.debug(f"rejected product: {errors}")
    return JSONResponse(status_code=400, content={"errors": errors})


@router.get("", summary="List products")
def list_products(repo: ProductRepository = Depends(get_product_repo)):
    try:
        items = repo.list()
    except ProductStoreError:
        raise _store_error()
    return [ProductOut.model_validate(p).model_dump() for p in items]


@router.get("/{product_id}", summary="Get product by id")
def get_product(product_id: str, repo: ProductRepository = Depends(get_product_repo)):
    pid = parse_product_id(product_id)
    try:
        p = repo.get(pid)
    except ProductStoreError:
        raise _store_error()
    if not p:
        raise HTTPException(status_code=404, detail="Not found")
    return ProductOut.model_validate(p).model_dump()


@router.post("", status_code=201, summary="Create product")
def create_product(payload: ProductIn, repo: ProductRepository = Depends(get_product_repo)):
    result = validate_product(payload)
    if not result.valid:
        return _invalid(result.errors)
    try:
        p = repo.create(result.value)
    except ProductStoreError:
        raise _store_error()
    return ProductOut.model_validate(p).model_dump()


@router.put("/{product_id}", summary="Replace product")
def update_product(
    product_id: str,
    payload: ProductIn,
    repo: ProductRepository = Depends(get_product_repo),
):
    pid = parse_product_id(product_id)
    result = validate_product(payload)
    if not result.valid:
        return _invalid(result.errors)
    try:
        p = repo.update(pid, result.value)
    except ProductStoreError:
        raise _store_error()
    if not p:
        raise HTTPException(status_code=404, detail="Not found")
    return ProductOut.model_validate(p).model_dump()


@router.delete("/{product_id}", status_code=204, summary="Delete product")
def delete_product(product_id: str, repo: ProductRepository = Depends(get_product_repo)):
    pid = parse_product_id(product_id)
    try:
        removed = repo.delete(pid)
    except ProductStoreError:
        raise _store_error()
    if not removed:
        raise HTTPException(status_code=404, detail="Not found")
    return Response(status_code=204)
