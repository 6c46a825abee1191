# src/sortscope/algorithms.py
from __future__ import annotations

from typing import Any, MutableSequence


def swap(a: MutableSequence[Any], i: int, j: int) -> None:
    a[i], a[j] = a[j], a[i]


# ----------------------
# Merge sort
# ----------------------
def merge_sort(a: MutableSequence[Any], left: int, right: int) -> None:
    """
    Sort a[left..right] (inclusive) in place. Stable: on equal keys the
    element from the left run is taken first.
    """
    if left >= right:
        return
    mid = left + (right - left) // 2
    merge_sort(a, left, mid)
    merge_sort(a, mid + 1, right)
    merge(a, left, mid, right)


def merge(a: MutableSequence[Any], left: int, mid: int, right: int) -> None:
    temp = []
    i = left
    j = mid + 1

    while i <= mid and j <= right:
        if a[i] <= a[j]:
            temp.append(a[i])
            i += 1
        else:
            temp.append(a[j])
            j += 1
    while i <= mid:
        temp.append(a[i])
        i += 1
    while j <= right:
        temp.append(a[j])
        j += 1

    for k, item in enumerate(temp):
        a[left + k] = item


# ----------------------
# Quick sort
# ----------------------
def quick_sort(a: MutableSequence[Any], left: int, right: int) -> None:
    """
    Lomuto quick sort on a[left..right]. The pivot is always the last element,
    so already-sorted input is the O(n^2) worst case with recursion depth n-1.
    """
    if left >= right:
        return
    p = partition(a, left, right)
    quick_sort(a, left, p - 1)
    quick_sort(a, p + 1, right)


def partition(a: MutableSequence[Any], left: int, right: int) -> int:
    pivot = a[right]
    i = left - 1
    for j in range(left, right):
        if a[j] <= pivot:
            i += 1
            swap(a, i, j)
    swap(a, i + 1, right)
    return i + 1


# ----------------------
# Heap sort
# ----------------------
def heap_sort(a: MutableSequence[Any], left: int, right: int) -> None:
    """
    Heap sort over the window a[left..right]. Heap positions are 0-based
    within the window; `left` is the base offset into the sequence.
    """
    n = right - left + 1
    for i in range(n // 2 - 1, -1, -1):
        heapify(a, i, n - 1, left)
    for i in range(n - 1, 0, -1):
        swap(a, left, left + i)
        heapify(a, 0, i - 1, left)


def heapify(a: MutableSequence[Any], root: int, last: int, base: int = 0) -> None:
    """Sift the node at heap position `root` down within heap positions [0, last]."""
    while True:
        largest = root
        left_child = 2 * root + 1
        right_child = 2 * root + 2

        if left_child <= last and a[base + left_child] > a[base + largest]:
            largest = left_child
        if right_child <= last and a[base + right_child] > a[base + largest]:
            largest = right_child
        if largest == root:
            break
        swap(a, base + root, base + largest)
        root = largest


# ----------------------
# Quadratic sorts (return an operation count)
# ----------------------
def bubble_sort(a: MutableSequence[Any], size: int) -> int:
    """Bubble sort the first `size` elements; returns the number of pair comparisons."""
    comparisons = 0
    for i in range(size - 1):
        swapped = False
        for j in range(size - 1 - i):
            comparisons += 1
            if a[j] > a[j + 1]:
                swap(a, j, j + 1)
                swapped = True
        if not swapped:
            break
    return comparisons


def transposition_sort(a: MutableSequence[Any], size: int) -> int:
    """
    Odd-even transposition sort. Each iteration runs an odd pass (1,2),(3,4),...
    followed by an even pass (0,1),(2,3),... and stops after an iteration in
    which neither pass swapped. Returns the number of passes, which is always
    even and at least 2 (size < 2 still runs one no-op iteration).
    """
    is_sorted = False
    steps = 0

    while not is_sorted:
        is_sorted = True

        for i in range(1, size - 1, 2):
            if a[i] > a[i + 1]:
                swap(a, i, i + 1)
                is_sorted = False
        steps += 1

        for i in range(0, size - 1, 2):
            if a[i] > a[i + 1]:
                swap(a, i, i + 1)
                is_sorted = False
        steps += 1

    return steps
