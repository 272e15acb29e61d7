"""
Status overlay for the tracking demo.
"""

import cv2


class StatusDisplay:
    """Draws a small status box with hand count, inference time and FPS."""

    def __init__(self):
        self.colors = {
            'detected': (0, 255, 0),
            'lost': (0, 0, 255),
            'text': (255, 255, 255),
        }
        self.font = cv2.FONT_HERSHEY_SIMPLEX

    def draw_status_box(self, frame, hand_count, fps=0.0, inference_ms=None, body_score=None):
        """Draw the status box in the top-left corner."""
        height = 80 if body_score is None else 100
        cv2.rectangle(frame, (10, 10), (230, height), (0, 0, 0), -1)
        cv2.rectangle(frame, (10, 10), (230, height), self.colors['text'], 1)

        if hand_count:
            status, color = f"HANDS: {hand_count}", self.colors['detected']
        else:
            status, color = "NO HANDS", self.colors['lost']
        cv2.putText(frame, status, (20, 35), self.font, 0.7, color, 2)

        details = f"FPS: {fps:.1f}"
        if inference_ms is not None:
            details += f"  Inference: {inference_ms:.1f}ms"
        cv2.putText(frame, details, (20, 60), self.font, 0.45, self.colors['text'], 1)

        if body_score is not None:
            cv2.putText(frame, f"Body score: {body_score:.2f}", (20, 85), self.font, 0.45, self.colors['text'], 1)
        return frame
