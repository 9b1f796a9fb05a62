"""Video writing utilities for trace replays"""

import cv2
import subprocess
from pathlib import Path

from ..config.config import FPS, OUTPUT_DIR, DEFAULT_HOLD_SECONDS, calculate_dimensions
from ..cleanup.cleanup_utils import ensure_output_dir
from ..playback.replay import create_replay
from ..playback.trace_utils import load_trace, trace_duration
from ..utils.log_utils import log_info, log_success, log_warning


def write_frames_to_video(frames, output_path, width, height, fps=FPS, show_progress=True):
    """Write frames to a video file

    Args:
        frames: Iterable of BGR frames (numpy.ndarray), may be a generator
        output_path: Path to output video file
        width: Frame width in pixels
        height: Frame height in pixels
        fps: Frames per second
        show_progress: Whether to show progress updates

    Returns:
        int: Number of frames written
    """
    fourcc = cv2.VideoWriter_fourcc(*'mp4v')
    out = cv2.VideoWriter(str(output_path), fourcc, fps, (width, height))

    if not out.isOpened():
        raise ValueError(f"Could not open video writer for: {output_path}")

    frame_count = 0
    try:
        for frame in frames:
            out.write(frame)
            frame_count += 1
            if show_progress and frame_count % 60 == 0:
                log_info(f"Progress: {frame_count} frames ({frame_count / fps:.1f}s)")
    finally:
        out.release()

    return frame_count


def convert_to_h264(video_path):
    """Convert video to H.264 codec using ffmpeg

    Args:
        video_path: Path to the video file to convert

    Returns:
        bool: True if conversion successful, False otherwise
    """
    log_info("\nConverting to H.264 (if ffmpeg available)...")
    temp_output = video_path.with_suffix('.tmp.mp4')

    try:
        subprocess.run([
            'ffmpeg', '-y', '-i', str(video_path),
            '-c:v', 'libx264', '-preset', 'medium', '-crf', '23',
            '-pix_fmt', 'yuv420p', str(temp_output)
        ], check=True, capture_output=True)
    except (subprocess.CalledProcessError, FileNotFoundError):
        log_warning("ffmpeg not found or failed. Video saved as mp4v codec.")
        temp_output.unlink(missing_ok=True)
        return False

    temp_output.replace(video_path)
    log_success(f"✓ Converted to H.264: {video_path}")
    return True


def create_replay_video(trace_path, output_path, cleanup_manager, aspect_ratio=None, quality=None,
                        brush_size=None, slow_simulation=None, color=None,
                        hold_seconds=DEFAULT_HOLD_SECONDS, fps=FPS):
    """Replay a recorded trace and render it to a video

    Args:
        trace_path: Path to the trace JSON or URL
        output_path: Path to output video file (relative paths go to output/)
        cleanup_manager: CleanupManager for downloaded traces
        aspect_ratio: Aspect ratio preset (None uses default)
        quality: Quality preset (None uses default)
        brush_size: Initial brush size (None uses default)
        slow_simulation: Integration mode (None uses config)
        color: Initial ink color, BGR (None uses default)
        hold_seconds: Seconds to hold the finished drawing
        fps: Frames per second

    Returns:
        Path: Path to the created video file
    """
    width, height = calculate_dimensions(aspect_ratio, quality)
    output_path = _resolve_output_path(output_path)

    log_info(f"Loading trace: {trace_path}")
    events = load_trace(trace_path, cleanup_manager, width, height)
    log_info(f"Loaded {len(events)} events ({trace_duration(events) / 1000:.1f}s)")

    options = {}
    if brush_size is not None:
        options["brush_size"] = brush_size
    if slow_simulation is not None:
        options["slow_simulation"] = slow_simulation
    if color is not None:
        options["color"] = color
    session = create_replay(events, width, height, fps=fps, **options)

    log_info(f"Creating video: {output_path} ({width}x{height} @ {fps} fps)")
    frame_count = write_frames_to_video(session.frames(hold_seconds), output_path, width, height, fps)
    log_success(f"✓ Video created successfully: {output_path} ({frame_count} frames, "
                f"{len(session.board.paths)} strokes)")

    convert_to_h264(Path(output_path))

    return output_path


def _resolve_output_path(output_path):
    """Resolve output path, using output directory if relative path

    Args:
        output_path: Requested output path (string or Path)

    Returns:
        Path: Resolved absolute output path
    """
    output_path = Path(output_path)

    if not output_path.is_absolute():
        output_path = OUTPUT_DIR / output_path

    ensure_output_dir(output_path)

    return output_path
