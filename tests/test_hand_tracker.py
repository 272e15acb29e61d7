from config.settings import HandConfig
from tracking.hand_tracker import RegionTracker
from utils.box import make_box


def test_new_tracker_always_runs_detector():
    tracker = RegionTracker()
    assert tracker.should_run_detector(skip_frames=100)


def test_no_detected_hands_forces_detector():
    tracker = RegionTracker()
    tracker.regions = [make_box((0, 0), (10, 10))]
    tracker.detected_hands = 0
    tracker.runs_without_detector = 0
    assert tracker.should_run_detector(skip_frames=10)


def test_count_mismatch_forces_detector():
    tracker = RegionTracker()
    tracker.regions = [make_box((0, 0), (10, 10)), make_box((20, 20), (30, 30))]
    tracker.detected_hands = 1
    assert tracker.needs_fresh_boxes()


def test_stable_tracker_waits_for_skip_frames():
    tracker = RegionTracker()
    tracker.regions = [make_box((0, 0), (10, 10))]
    tracker.detected_hands = 1
    tracker.runs_without_detector = 4
    assert not tracker.should_run_detector(skip_frames=5)
    tracker.runs_without_detector = 5
    assert tracker.should_run_detector(skip_frames=5)


def test_reconcile_empty_detection_clears_state():
    tracker = RegionTracker()
    tracker.regions = [make_box((0, 0), (10, 10))]
    tracker.detected_hands = 1
    tracker.runs_without_detector = 3

    use_fresh, has_regions = tracker.reconcile([], HandConfig())
    assert use_fresh
    assert not has_regions
    assert tracker.regions == []
    assert tracker.detected_hands == 0
    assert tracker.runs_without_detector == 0


def test_reconcile_caps_to_max_hands():
    tracker = RegionTracker()
    boxes = [make_box((0, 0), (10, 10)), make_box((20, 20), (30, 30))]
    tracker.reconcile(boxes, HandConfig(max_hands=1))
    assert tracker.regions == boxes[:1]


def test_reconcile_keeps_tracked_boxes_when_count_unchanged():
    tracked = make_box((0, 0), (10, 10))
    tracker = RegionTracker()
    tracker.regions = [tracked]
    tracker.detected_hands = 1
    tracker.runs_without_detector = 5

    use_fresh, has_regions = tracker.reconcile([make_box((50, 50), (60, 60))], HandConfig(max_hands=2))
    assert not use_fresh
    assert has_regions
    assert tracker.regions[0] is tracked
    assert tracker.runs_without_detector == 0


def test_reconcile_replaces_on_count_change_with_multiple_hands():
    tracker = RegionTracker()
    tracker.regions = [make_box((0, 0), (10, 10))]
    tracker.detected_hands = 1
    fresh = [make_box((0, 0), (10, 10)), make_box((50, 50), (60, 60))]

    use_fresh, _ = tracker.reconcile(fresh, HandConfig(max_hands=2))
    assert use_fresh
    assert tracker.regions == fresh


def test_reconcile_without_detector_counts_skipped_run():
    tracker = RegionTracker()
    tracker.regions = [make_box((0, 0), (10, 10))]
    tracker.detected_hands = 1
    use_fresh, has_regions = tracker.reconcile(None, HandConfig(), detector_ran=False)
    assert (use_fresh, has_regions) == (False, True)
    assert tracker.runs_without_detector == 1


def test_update_region_keeps_previous_box_when_overlap_is_high():
    previous = make_box((0, 0), (100, 100))
    tracker = RegionTracker()
    tracker.regions = [previous]

    kept = tracker.update_region(0, make_box((2, 2), (101, 101)))
    assert kept is previous
    assert tracker.regions[0] is previous
    assert tracker.regions[0].start_point == (0.0, 0.0)


def test_update_region_replaces_moved_box():
    tracker = RegionTracker()
    tracker.regions = [make_box((0, 0), (100, 100))]
    moved = make_box((40, 40), (140, 140))
    assert tracker.update_region(0, moved) is moved
    assert tracker.regions[0] is moved


def test_update_region_fills_empty_slot():
    tracker = RegionTracker()
    tracker.regions = [None]
    box = make_box((0, 0), (10, 10))
    tracker.update_region(0, box)
    assert tracker.regions == [box]
