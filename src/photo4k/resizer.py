#!/usr/bin/env python3
"""
4K Photo Conversion Pipeline
=================================================

Converts a folder of photos into 16:9, 3840x2160 progressive JPEGs.

Pipeline (per file):
  1. Apply EXIF orientation and clear the tag
  2. Pick a 16:9 crop window — wide images are scanned for the most
     textured region, tall images keep the upper quarter bias
  3. Resample to 3840x2160 with a Lanczos filter
  4. Unsharp mask to recover detail lost in resampling
  5. Encode as progressive JPEG (quality 92), EXIF kept, ICC profile dropped

Usage:
  photo4k ~/Photos/Input ~/Photos/Output
  photo4k ./input ./output --workers 4
  python -m photo4k ./input ./output --debug

Requirements:
  pip install Pillow opencv-python-headless numpy tqdm

  For HEIC/HEIF input:
    pip install pillow-heif

  For camera RAW input (cr2, nef, arw):
    pip install rawpy
"""

import argparse
import io
import math
import os
import sys
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import cv2
import numpy as np
from PIL import ExifTags, Image, ImageOps, UnidentifiedImageError
from tqdm.auto import tqdm

from photo4k.errors import DecodeError, DegenerateImage, EncodeError, PipelineError
from photo4k.interest import prepare_interest_map, region_interest

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

TARGET_WIDTH = 3840
TARGET_HEIGHT = 2160
TARGET_RATIO = 16 / 9
JPEG_QUALITY = 92
SHARPEN_RADIUS = 1.5
SHARPEN_AMOUNT = 0.5
OUTPUT_SUFFIX = "_4K"
HORIZONTAL_SCAN_STEPS = 20  # ~21 candidate offsets across the free width
HEIF_EXTENSIONS = {".heic", ".heif"}
RAW_EXTENSIONS = {".cr2", ".nef", ".arw"}
SUPPORTED_EXTENSIONS = {".jpg", ".jpeg", ".png", ".bmp", ".tiff"} | HEIF_EXTENSIONS | RAW_EXTENSIONS
AXIS_HORIZONTAL = "horizontal"
AXIS_VERTICAL = "vertical"
MAX_WORKERS = 16
WORKERS_ENV_VAR = "PHOTO4K_WORKERS"
SCAN_WORKERS_ENV_VAR = "PHOTO4K_SCAN_WORKERS"
DEBUG_ENV_VAR = "PHOTO4K_DEBUG"
# Single-channel modes deeper than 8 bits (16-bit PNG/TIFF scans, float TIFF)
HIGH_BIT_DEPTH_MODES = {"I", "I;16", "I;16L", "I;16B", "I;16N", "F"}
# Source modes whose ICC profile still describes the RGB output
ICC_PASSTHROUGH_MODES = {"RGB", "RGBA", "RGBX", "P"}
# IFD0 tags that describe the source file layout rather than the photo;
# TIFF sources expose them through getexif(). 274 (orientation) is applied
# to the pixels, 34675 is the TIFF-embedded ICC profile.
NON_PORTABLE_EXIF_TAGS = frozenset(
    {
        256, 257, 258, 259, 262, 266, 273, 274, 277, 278, 279, 284, 317, 320,
        322, 323, 324, 325, 330, 338, 339, 347, 513, 514, 530, 34675,
    }
)

# Panoramas routinely exceed Pillow's decompression-bomb threshold.
Image.MAX_IMAGE_PIXELS = None


# ---------------------------------------------------------------------------
# Environment helpers
# ---------------------------------------------------------------------------

TRUTHY = {"1", "true", "yes", "on"}
FALSY = {"0", "false", "no", "off"}


def _load_dotenv(env_path: Path) -> dict[str, str]:
    """KEY=value pairs from a .env file; a missing or unreadable file yields {}."""
    try:
        lines = env_path.read_text(encoding="utf-8").splitlines()
    except OSError:
        return {}

    pairs: dict[str, str] = {}
    for line in map(str.strip, lines):
        if line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export ") :]
        key, sep, value = line.partition("=")
        key, value = key.strip(), value.strip()
        if not sep or not key:
            continue
        if len(value) >= 2 and value[0] in "'\"" and value[-1] == value[0]:
            value = value[1:-1]
        pairs[key] = value
    return pairs


def _dotenv_paths(search_dir: Optional[Path]) -> list[Path]:
    # Working directory first, then the photo folder; each file read once.
    dirs = [Path.cwd()] if search_dir is None else [Path.cwd(), search_dir]
    return list(dict.fromkeys((d / ".env").resolve() for d in dirs))


def _setting(var_name: str, search_dir: Optional[Path] = None) -> Optional[str]:
    """Look up a PHOTO4K_* setting: the process environment wins over .env files."""
    value = os.environ.get(var_name, "").strip()
    if value:
        return value

    for env_path in _dotenv_paths(search_dir):
        value = _load_dotenv(env_path).get(var_name, "").strip()
        if value:
            print(f"  📝 {var_name}={value} (from {env_path})")
            return value
    return None


def _setting_int(var_name: str, default: int, search_dir: Optional[Path] = None) -> int:
    try:
        return int(_setting(var_name, search_dir) or default)
    except ValueError:
        return default


def _setting_bool(var_name: str, default: bool, search_dir: Optional[Path] = None) -> bool:
    raw = (_setting(var_name, search_dir) or "").lower()
    if raw in TRUTHY:
        return True
    if raw in FALSY:
        return False
    return default


def _clamp_workers(value: int) -> int:
    return min(MAX_WORKERS, max(1, value))


def resolve_workers(search_dir: Optional[Path] = None) -> int:
    """Resolve how many files are converted concurrently."""
    return _clamp_workers(_setting_int(WORKERS_ENV_VAR, 1, search_dir))


def resolve_scan_workers(search_dir: Optional[Path] = None) -> int:
    """Resolve thread count for scoring crop candidates."""
    return _clamp_workers(_setting_int(SCAN_WORKERS_ENV_VAR, 1, search_dir))


def resolve_debug(search_dir: Optional[Path] = None) -> bool:
    """Resolve whether crop decisions are printed."""
    return _setting_bool(DEBUG_ENV_VAR, False, search_dir)


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Rectangle:
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def fits_within(self, width: int, height: int) -> bool:
        return (
            self.x >= 0
            and self.y >= 0
            and self.width > 0
            and self.height > 0
            and self.right <= width
            and self.bottom <= height
        )


@dataclass(frozen=True)
class CropDecision:
    rect: Rectangle
    axis: str
    # (offset, score) pairs in scan order; empty for vertical crops
    candidates: tuple[tuple[int, float], ...] = ()

    @property
    def best_score(self) -> float:
        return max((score for _offset, score in self.candidates), default=0.0)


@dataclass(frozen=True)
class PipelineConfig:
    target_width: int = TARGET_WIDTH
    target_height: int = TARGET_HEIGHT
    target_ratio: float = TARGET_RATIO
    resample_filter: int = cv2.INTER_LANCZOS4
    sharpen_radius: float = SHARPEN_RADIUS
    sharpen_amount: float = SHARPEN_AMOUNT
    quality: int = JPEG_QUALITY
    output_format: str = "JPEG"
    progressive: bool = True
    strip_icc: bool = True
    output_suffix: str = OUTPUT_SUFFIX
    scan_workers: int = 1


DEFAULT_CONFIG = PipelineConfig()


@dataclass
class DecodedImage:
    image: Image.Image
    source_path: Path
    # Output-ready EXIF (layout tags, ICC and orientation removed), None when empty
    exif: Optional[Image.Exif] = None
    icc_profile: Optional[bytes] = None

    @property
    def size(self) -> tuple[int, int]:
        return self.image.size


@dataclass
class BatchSummary:
    processed: int = 0
    errors: int = 0
    outputs: list[Path] = field(default_factory=list)
    failures: list[tuple[Path, str]] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Crop locator
# ---------------------------------------------------------------------------


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def plan_crop(width: int, height: int, target_ratio: float = TARGET_RATIO) -> tuple[str, int, int]:
    """Return ``(axis, crop_w, crop_h)`` for cutting a ``target_ratio`` window.

    Images wider than the target lose width and keep their full height;
    everything else, including an exact ratio match, loses height.
    """
    if width <= 0 or height <= 0:
        raise DegenerateImage(f"Image has no area ({width}x{height})")

    current_ratio = width / height
    if current_ratio > target_ratio:
        crop_h = height
        crop_w = _round_half_up(crop_h * target_ratio)
        axis = AXIS_HORIZONTAL
    else:
        crop_w = width
        crop_h = _round_half_up(crop_w / target_ratio)
        axis = AXIS_VERTICAL

    if crop_w <= 0 or crop_h <= 0 or crop_w > width or crop_h > height:
        raise DegenerateImage(
            f"Cannot cut a {crop_w}x{crop_h} window from a {width}x{height} image"
        )
    return axis, crop_w, crop_h


def scan_offsets(max_x: int) -> list[int]:
    """Candidate x offsets for a horizontal scan; 0 is always first."""
    step = max(1, max_x // HORIZONTAL_SCAN_STEPS)
    return list(range(0, max_x + 1, step))


def _pick_best_offset(scored: list[tuple[int, float]], default_offset: int) -> int:
    # Strictly-greater fold: the earliest offset wins ties, all-zero keeps the default.
    best_offset = default_offset
    best_score = 0.0
    for offset, score in scored:
        if score > best_score:
            best_score = score
            best_offset = offset
    return best_offset


def _score_offsets(
    interest_map: np.ndarray, offsets: list[int], crop_w: int, crop_h: int, workers: int = 1
) -> list[tuple[int, float]]:
    def score_at(x: int) -> float:
        return region_interest(interest_map, Rectangle(x, 0, crop_w, crop_h))

    if workers > 1 and len(offsets) > 1:
        # map() yields in submission order, so ties resolve exactly as the serial scan.
        with ThreadPoolExecutor(max_workers=workers) as executor:
            scores = list(executor.map(score_at, offsets))
    else:
        scores = [score_at(x) for x in offsets]
    return list(zip(offsets, scores))


def locate(
    pixels: np.ndarray,
    target_ratio: float = TARGET_RATIO,
    workers: int = 1,
    interest_map: Optional[np.ndarray] = None,
) -> CropDecision:
    """Choose the crop window for ``pixels`` (H x W [x C] array).

    Horizontal crops scan ~21 offsets and keep the one whose interest map
    has the highest standard deviation, starting from the centre so a
    featureless image degrades to a centre crop. Vertical crops skip the
    scan and sit a quarter of the way down the free height.
    """
    height, width = pixels.shape[:2]
    axis, crop_w, crop_h = plan_crop(width, height, target_ratio)

    if axis == AXIS_HORIZONTAL:
        max_x = width - crop_w
        if interest_map is None:
            interest_map = prepare_interest_map(pixels)
        scored = _score_offsets(interest_map, scan_offsets(max_x), crop_w, crop_h, workers=workers)
        rect = Rectangle(_pick_best_offset(scored, max_x // 2), 0, crop_w, crop_h)
        candidates = tuple(scored)
    else:
        max_y = height - crop_h
        rect = Rectangle(0, min(max_y // 4, max_y), crop_w, crop_h)
        candidates = ()

    if not rect.fits_within(width, height):
        raise DegenerateImage(f"Crop {rect} falls outside {width}x{height}")
    return CropDecision(rect=rect, axis=axis, candidates=candidates)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def _codec_setup_hint(suffix: str) -> str:
    """Return an install hint for formats that need optional codecs."""
    if suffix in HEIF_EXTENSIONS:
        return "Install HEIC/HEIF support: python -m pip install -e '.[heif]'"
    if suffix in RAW_EXTENSIONS:
        return "Install camera RAW support: python -m pip install -e '.[raw]'"
    return "The file may be corrupt or in an unsupported format."


def _decode_raw(path: Path) -> Image.Image:
    try:
        import rawpy
    except ImportError as e:
        raise DecodeError(
            f"No RAW decoder available for {path.name}. {_codec_setup_hint(path.suffix.lower())}"
        ) from e

    try:
        with rawpy.imread(str(path)) as raw:
            rgb = raw.postprocess(use_camera_wb=True, output_bps=8)
    except (rawpy.LibRawError, OSError) as e:
        raise DecodeError(f"Cannot decode RAW file {path.name}: {e}") from e
    return Image.fromarray(rgb)


def _register_heif_opener() -> None:
    try:
        from pillow_heif import register_heif_opener
    except ImportError as e:
        raise DecodeError(f"No HEIF decoder available. {_codec_setup_hint('.heic')}") from e
    register_heif_opener()


def _portable_exif(exif: Image.Exif) -> Optional[Image.Exif]:
    """Copy the photo's EXIF into a standalone block fit for the output JPEG.

    TIFF sources report their whole first directory through getexif(), so the
    layout tags and the embedded ICC profile are left behind here, together
    with orientation. Exif/GPS sub-directories are resolved eagerly because
    they are read from the source file, which is closed after decoding. The
    IFD1 thumbnail is never copied.
    """
    portable = Image.Exif()
    for tag, value in exif.items():
        if tag in NON_PORTABLE_EXIF_TAGS:
            continue
        if tag in (ExifTags.IFD.Exif, ExifTags.IFD.GPSInfo):
            value = dict(exif.get_ifd(tag))
            if tag == ExifTags.IFD.Exif and ExifTags.IFD.Interop in value:
                value[ExifTags.IFD.Interop] = dict(exif.get_ifd(ExifTags.IFD.Interop))
            if not value:
                continue
        portable[tag] = value
    return portable if len(portable) else None


def decode_image(path: Path) -> DecodedImage:
    """Decode ``path`` into a DecodedImage with its EXIF and ICC metadata."""
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix in RAW_EXTENSIONS:
        return DecodedImage(image=_decode_raw(path), source_path=path)

    if suffix in HEIF_EXTENSIONS:
        _register_heif_opener()

    try:
        with Image.open(path) as image:
            image.load()
            # getexif() caches on the image, so exif_transpose still works once closed.
            exif = _portable_exif(image.getexif())
    except UnidentifiedImageError as e:
        raise DecodeError(f"Cannot read {path.name}: {e}. {_codec_setup_hint(suffix)}") from e
    except (OSError, ValueError, SyntaxError) as e:
        raise DecodeError(f"Cannot read {path.name}: {e}") from e
    return DecodedImage(
        image=image,
        source_path=path,
        exif=exif,
        icc_profile=image.info.get("icc_profile"),
    )


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


def _orient(image: Image.Image) -> Image.Image:
    """Return ``image`` turned upright according to its EXIF orientation."""
    try:
        upright = ImageOps.exif_transpose(image)
    except (OSError, ValueError, SyntaxError) as e:
        raise DecodeError(f"Cannot apply orientation: {e}") from e
    return image if upright is None else upright


def _to_rgb(image: Image.Image) -> Image.Image:
    if image.mode in HIGH_BIT_DEPTH_MODES:
        data = np.asarray(image)
        if image.mode == "F" and data.size and float(data.max()) <= 1.0:
            data = data * 255.0
        else:
            data = data / 257.0  # 0..65535 -> 0..255
        image = Image.fromarray(np.clip(np.rint(data), 0, 255).astype(np.uint8))
    return image if image.mode == "RGB" else image.convert("RGB")


def unsharp_mask(pixels: np.ndarray, radius: float, amount: float) -> np.ndarray:
    """Sharpen with ``pixels + amount * (pixels - gaussian_blur(pixels))``."""
    blurred = cv2.GaussianBlur(pixels, (0, 0), sigmaX=radius, sigmaY=radius)
    return cv2.addWeighted(pixels, 1.0 + amount, blurred, -amount, 0)


def encode_jpeg(
    pixels: np.ndarray,
    exif: Optional[Image.Exif],
    icc_profile: Optional[bytes],
    config: PipelineConfig = DEFAULT_CONFIG,
) -> bytes:
    """Encode RGB ``pixels`` as JPEG bytes with the output metadata policy.

    With EXIF present it is written back and the ICC profile is dropped.
    Without EXIF the profile is left alone.
    """
    save_kwargs = {"quality": config.quality, "progressive": config.progressive}
    if exif is not None:
        save_kwargs["exif"] = exif.tobytes()
        if icc_profile and not config.strip_icc:
            save_kwargs["icc_profile"] = icc_profile
    elif icc_profile:
        save_kwargs["icc_profile"] = icc_profile

    buffer = io.BytesIO()
    try:
        Image.fromarray(pixels).save(buffer, config.output_format, **save_kwargs)
    except (OSError, ValueError) as e:
        raise EncodeError(f"JPEG encode failed: {e}") from e
    return buffer.getvalue()


def output_name(source_path: Path, config: PipelineConfig = DEFAULT_CONFIG) -> str:
    return f"{Path(source_path).stem}{config.output_suffix}.jpg"


def process(decoded: DecodedImage, config: PipelineConfig = DEFAULT_CONFIG, debug: bool = False) -> bytes:
    """Run orient → crop → resample → sharpen → encode on one decoded image."""
    width, height = decoded.size
    if width < 1 or height < 1:
        raise DegenerateImage(f"{decoded.source_path.name} has no area ({width}x{height})")

    # --- Stage 1: Orient ---
    image = _orient(decoded.image)
    # A CMYK or gray profile would mislabel the RGB output.
    icc_profile = decoded.icc_profile if decoded.image.mode in ICC_PASSTHROUGH_MODES else None

    # --- Stage 2: Locate & crop ---
    pixels = np.asarray(_to_rgb(image))
    decision = locate(pixels, config.target_ratio, workers=config.scan_workers)
    rect = decision.rect
    cropped = np.ascontiguousarray(pixels[rect.y : rect.bottom, rect.x : rect.right])

    if debug:
        tqdm.write(
            f"  🔎 {decoded.source_path.name}: {decision.axis} crop "
            f"({rect.x},{rect.y},{rect.width},{rect.height}) | "
            f"candidates={len(decision.candidates)} best={decision.best_score:.2f}"
        )

    # --- Stage 3: Resample ---
    try:
        resized = cv2.resize(
            cropped,
            (config.target_width, config.target_height),
            interpolation=config.resample_filter,
        )
    except cv2.error as e:
        raise PipelineError(f"Resample failed for {decoded.source_path.name}: {e}") from e

    # --- Stage 4: Sharpen ---
    sharpened = unsharp_mask(resized, config.sharpen_radius, config.sharpen_amount)

    # --- Stage 5: Encode ---
    return encode_jpeg(sharpened, decoded.exif, icc_profile, config)


def convert_file(
    src: Path,
    output_folder: Path,
    config: PipelineConfig = DEFAULT_CONFIG,
    debug: bool = False,
) -> Path:
    """Decode, process and write one file; returns the written path."""
    payload = process(decode_image(src), config, debug=debug)

    dest = output_folder / output_name(src, config)
    partial = dest.with_name(f"{dest.name}.part")
    try:
        partial.write_bytes(payload)
        os.replace(partial, dest)
    except OSError as e:
        partial.unlink(missing_ok=True)
        raise EncodeError(f"Could not write {dest}: {e}") from e
    return dest


# ---------------------------------------------------------------------------
# Batch driver
# ---------------------------------------------------------------------------


def expand_path(path: str) -> Path:
    """Expand ``~`` and return an absolute path."""
    return Path(path).expanduser().absolute()


def find_images(folder: Path) -> list[Path]:
    """List supported images in ``folder`` (top level only)."""
    return [
        p
        for p in sorted(folder.iterdir())
        if p.is_file() and p.suffix.lower() in SUPPORTED_EXTENSIONS
    ]


def run_batch(
    input_folder: str,
    output_folder: str,
    workers: Optional[int] = None,
    scan_workers: Optional[int] = None,
    debug: Optional[bool] = None,
    show_progress: bool = True,
) -> BatchSummary:
    """
    Convert every supported image in input_folder into output_folder.

    Args:
        input_folder: Folder with source photos (``~`` is expanded)
        output_folder: Destination for ``<stem>_4K.jpg`` files, created if missing
        workers: Files converted concurrently (default from PHOTO4K_WORKERS)
        scan_workers: Threads per file for crop scoring (default from PHOTO4K_SCAN_WORKERS)
        debug: Print crop decisions (default from PHOTO4K_DEBUG)
        show_progress: Show a tqdm progress bar
    """
    src = expand_path(input_folder)
    out = expand_path(output_folder)

    if not src.is_dir():
        print(f"❌ Source folder does not exist: {src}")
        sys.exit(1)

    out.mkdir(parents=True, exist_ok=True)

    workers = _clamp_workers(workers) if workers is not None else resolve_workers(search_dir=src)
    scan_workers = (
        _clamp_workers(scan_workers) if scan_workers is not None else resolve_scan_workers(search_dir=src)
    )
    if debug is None:
        debug = resolve_debug(search_dir=src)
    config = PipelineConfig(scan_workers=scan_workers)

    files = find_images(src)
    print("=" * 60)
    print("🖼️  4K Photo Conversion")
    print(f"   Input:   {src}")
    print(f"   Output:  {out}")
    print(f"   Target:  {config.target_width}x{config.target_height} JPEG q{config.quality}")
    print(f"   Workers: {workers} file(s), {scan_workers} scan thread(s)")
    print(f"📁 Found {len(files)} images")
    print("=" * 60)

    summary = BatchSummary()
    progress_bar = tqdm(total=len(files), desc="  Converting", unit="img", disable=not show_progress)

    def record(path: Path, dest: Optional[Path], error: Optional[Exception]) -> None:
        if error is None:
            summary.processed += 1
            summary.outputs.append(dest)
            tqdm.write(f"✅ Processed: {path.name}")
        else:
            summary.errors += 1
            summary.failures.append((path, str(error)))
            tqdm.write(f"❌ Error on {path.name}: {error}")
        progress_bar.update(1)

    if workers <= 1:
        for path in files:
            try:
                dest = convert_file(path, out, config, debug=debug)
            except Exception as e:
                record(path, None, e)
            else:
                record(path, dest, None)
    else:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {executor.submit(convert_file, path, out, config, debug): path for path in files}
            for future in as_completed(futures):
                path = futures[future]
                try:
                    dest = future.result()
                except Exception as e:
                    record(path, None, e)
                else:
                    record(path, dest, None)

    progress_bar.close()
    print(
        f"\n🎉 Processing complete! {summary.processed} files processed, {summary.errors} errors"
    )
    return summary


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


class _FullHelpParser(argparse.ArgumentParser):
    """Show the whole option list, not just usage, when the command line is wrong."""

    def error(self, message):
        sys.stderr.write(f"{self.prog}: error: {message}\n\n")
        self.print_help(sys.stderr)
        self.exit(2)


def main():
    parser = _FullHelpParser(
        prog="photo4k",
        description="Convert photos into 16:9 3840x2160 JPEGs with content-aware cropping.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s ~/Photos/Input ~/Photos/Output
  %(prog)s ./input ./output --workers 4
  %(prog)s ./input ./output --scan-workers 4 --debug
        """,
    )
    parser.add_argument("input", help="Folder containing source photos")
    parser.add_argument("output", help="Folder for <name>_4K.jpg outputs (created if missing)")
    parser.add_argument(
        "--workers",
        "-w",
        type=int,
        default=None,
        help=f"Files converted in parallel (default: ${WORKERS_ENV_VAR} or 1)",
    )
    parser.add_argument(
        "--scan-workers",
        type=int,
        default=None,
        help=f"Threads used to score crop candidates (default: ${SCAN_WORKERS_ENV_VAR} or 1)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print the chosen crop window for every file.",
    )

    args = parser.parse_args()

    run_batch(
        input_folder=args.input,
        output_folder=args.output,
        workers=args.workers,
        scan_workers=args.scan_workers,
        debug=True if args.debug else None,
    )


if __name__ == "__main__":
    main()
