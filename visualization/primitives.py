"""
Drawing primitives for BGR frames.
"""

import math

import cv2
import numpy as np


class DrawOptions:
    """Style options shared by all drawing primitives."""

    def __init__(self, color=(255, 170, 173), label_color=(255, 255, 255), shadow_color=(0, 0, 0),
                 line_width=2, point_size=2, round_rect=8, font_scale=0.5,
                 use_depth=True, use_curves=False, fill_polygons=False, draw_labels=True,
                 draw_boxes=True, draw_points=True, draw_polygons=True, draw_direction=True):
        self.color = color
        self.label_color = label_color
        self.shadow_color = shadow_color
        self.line_width = line_width
        self.point_size = point_size
        self.round_rect = round_rect
        self.font_scale = font_scale
        self.use_depth = use_depth
        self.use_curves = use_curves
        self.fill_polygons = fill_polygons
        self.draw_labels = draw_labels
        self.draw_boxes = draw_boxes
        self.draw_points = draw_points
        self.draw_polygons = draw_polygons
        self.draw_direction = draw_direction

    def copy(self, **overrides):
        options = DrawOptions()
        options.__dict__.update(self.__dict__)
        options.__dict__.update(overrides)
        return options


def _pt(x, y):
    return (int(round(x)), int(round(y)))


def rad2deg(theta):
    return round(theta * 180 / math.pi)


def color_depth(z, rgb=(True, True, False)):
    """BGR color shifting with landmark depth, for enabled channels."""
    shift = int(3 * z)
    r = 127 + shift if rgb[0] else 255
    g = 127 - shift if rgb[1] else 255
    b = 127 - shift if rgb[2] else 255
    return tuple(max(0, min(255, c)) for c in (b, g, r))


def _point_color(z, options):
    if options.use_depth and z:
        return color_depth(z, (True, False, True) if z == -255 else (True, False, False))
    return options.color


def point(frame, x, y, z, options):
    """Filled dot, colored by depth when enabled."""
    cv2.circle(frame, _pt(x, y), max(1, int(options.point_size)), _point_color(z or 0, options), -1, cv2.LINE_AA)
    return frame


def rect(frame, x, y, width, height, options):
    """Rectangle with rounded corners, or an ellipse when use_curves is set."""
    thickness = max(1, int(options.line_width))
    if options.use_curves:
        center = _pt(x + width / 2, y + height / 2)
        axes = _pt(width / 2, height / 2)
        cv2.ellipse(frame, center, axes, 0, 0, 360, options.color, thickness, cv2.LINE_AA)
        return frame

    r = int(max(0, min(options.round_rect, width / 2, height / 2)))
    x0, y0 = _pt(x, y)
    x1, y1 = _pt(x + width, y + height)
    color = options.color
    cv2.line(frame, (x0 + r, y0), (x1 - r, y0), color, thickness, cv2.LINE_AA)
    cv2.line(frame, (x1, y0 + r), (x1, y1 - r), color, thickness, cv2.LINE_AA)
    cv2.line(frame, (x1 - r, y1), (x0 + r, y1), color, thickness, cv2.LINE_AA)
    cv2.line(frame, (x0, y1 - r), (x0, y0 + r), color, thickness, cv2.LINE_AA)
    if r > 0:
        cv2.ellipse(frame, (x0 + r, y0 + r), (r, r), 180, 0, 90, color, thickness, cv2.LINE_AA)
        cv2.ellipse(frame, (x1 - r, y0 + r), (r, r), 270, 0, 90, color, thickness, cv2.LINE_AA)
        cv2.ellipse(frame, (x1 - r, y1 - r), (r, r), 0, 0, 90, color, thickness, cv2.LINE_AA)
        cv2.ellipse(frame, (x0 + r, y1 - r), (r, r), 90, 0, 90, color, thickness, cv2.LINE_AA)
    return frame


def lines(frame, points, options):
    """Polyline through (x, y[, z]) points, segments colored by depth when enabled."""
    if len(points) < 2:
        return frame
    thickness = max(1, int(options.line_width))
    for start, end in zip(points[:-1], points[1:]):
        z = end[2] if len(end) > 2 else 0
        color = color_depth(z) if options.use_depth and z else options.color
        cv2.line(frame, _pt(start[0], start[1]), _pt(end[0], end[1]), color, thickness, cv2.LINE_AA)
    if options.fill_polygons:
        polygon = np.array([_pt(p[0], p[1]) for p in points], dtype=np.int32)
        cv2.fillPoly(frame, [polygon], options.color, cv2.LINE_AA)
    return frame


def _quadratic(p0, control, p1, steps=8):
    samples = []
    for i in range(1, steps + 1):
        t = i / steps
        a, b, c = (1 - t) ** 2, 2 * (1 - t) * t, t ** 2
        samples.append((a * p0[0] + b * control[0] + c * p1[0], a * p0[1] + b * control[1] + c * p1[1]))
    return samples


def curves(frame, points, options):
    """Smooth curve through points using midpoint quadratic segments."""
    if len(points) < 2:
        return frame
    if not options.use_curves or len(points) <= 2:
        return lines(frame, points, options)

    path = [(points[0][0], points[0][1])]
    current = path[0]
    for i in range(len(points) - 2):
        mid = ((points[i][0] + points[i + 1][0]) / 2, (points[i][1] + points[i + 1][1]) / 2)
        path.extend(_quadratic(current, points[i], mid))
        current = mid
    path.extend(_quadratic(current, points[-2], points[-1]))

    polyline = np.array([_pt(x, y) for x, y in path], dtype=np.int32)
    cv2.polylines(frame, [polyline], False, options.color, max(1, int(options.line_width)), cv2.LINE_AA)
    if options.fill_polygons:
        cv2.fillPoly(frame, [polyline], options.color, cv2.LINE_AA)
    return frame


def arrow(frame, start, end, options, radius=5):
    """Line from start to end with a filled triangular head."""
    cv2.line(frame, _pt(start[0], start[1]), _pt(end[0], end[1]), options.color,
             max(1, int(options.line_width)), cv2.LINE_AA)
    angle = math.atan2(end[1] - start[1], end[0] - start[0])
    head = []
    for _ in range(3):
        head.append(_pt(radius * math.cos(angle) + end[0], radius * math.sin(angle) + end[1]))
        angle += 2 * math.pi / 3
    cv2.fillPoly(frame, [np.array(head, dtype=np.int32)], options.color, cv2.LINE_AA)
    return frame


def label(frame, text, x, y, options):
    """Text with a shadow for readability on any background."""
    org = _pt(x, y)
    cv2.putText(frame, text, (org[0] + 1, org[1] + 1), cv2.FONT_HERSHEY_SIMPLEX, options.font_scale,
                options.shadow_color, 2, cv2.LINE_AA)
    cv2.putText(frame, text, org, cv2.FONT_HERSHEY_SIMPLEX, options.font_scale,
                options.label_color, 1, cv2.LINE_AA)
    return frame
