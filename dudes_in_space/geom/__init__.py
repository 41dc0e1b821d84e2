"""Geometry: angles, points, vectors, rectangles, matrices, non-negative numbers and range mapping."""