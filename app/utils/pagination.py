# app/utils/pagination.py

from pymongo import ASCENDING, DESCENDING

def build_pagination(page: int, page_size: int):
    skip = (page - 1) * page_size
    return skip, page_size

def build_sort(sort_by: str, sort_order: str = "desc"):
    direction = DESCENDING if sort_order == "desc" else ASCENDING
    # _id breaks ties in insertion order
    return [(sort_by, direction), ("_id", direction)]

def total_pages(total: int, page_size: int) -> int:
    return (total + page_size - 1) // page_size
