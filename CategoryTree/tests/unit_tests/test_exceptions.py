from CategoryTree.exceptions import (
    ActiveChildrenError,
    CategoryNotFoundError,
    CategoryTreeException,
    CircularReferenceError,
    ValidationError,
    get_http_status_code,
)


def test_not_found_maps_to_404():
    exc = CategoryNotFoundError("Category with ID x not found", category_id="x")

    assert get_http_status_code(exc) == 404
    assert exc.to_dict() == {
        "error_code": "RESOURCE_NOT_FOUND",
        "message": "Category with ID x not found",
        "details": {"resource_type": "category", "resource_id": "x"},
    }


def test_hierarchy_violations_map_to_400():
    assert get_http_status_code(CircularReferenceError("a", "b")) == 400
    assert get_http_status_code(ActiveChildrenError("a")) == 400
    assert isinstance(CircularReferenceError("a", "b"), ValidationError)
    assert isinstance(ActiveChildrenError("a"), ValidationError)


def test_generic_errors():
    assert get_http_status_code(CategoryTreeException("boom")) == 400
    assert get_http_status_code(RuntimeError("boom")) == 500
