"""Dynamic arrays, doubly linked lists, radix maps and their sorting algorithms."""

__version__ = "0.1.0"
__all__ = ["darray", "linked_list", "list_algos", "darray_algos", "radixmap"]