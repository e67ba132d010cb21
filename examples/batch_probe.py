"""
Example of probing a directory of images
"""

from collections import Counter
from pathlib import Path
from imageprobe import batch_probe


def main():
    photo_dir = Path("./photos")

    if not photo_dir.exists():
        print(f"Error: Directory {photo_dir} not found")
        print("Please create a 'photos' directory with some images")
        return

    images = sorted(p for p in photo_dir.iterdir() if p.is_file())

    if not images:
        print(f"No files found in {photo_dir}")
        return

    print(f"Found {len(images)} files")
    print("=" * 60)

    def on_progress(current, total, result):
        if result.success:
            info = result.info
            print(f"[{current}/{total}] ✓ {result.path.name}: "
                  f"{info.format.value} {info.width}x{info.height} ({info.orientation.value})")
        else:
            print(f"[{current}/{total}] ✗ {result.error}")

    results = batch_probe(images, progress_callback=on_progress)

    # Summary
    print("=" * 60)
    successful = [r for r in results if r.success]

    print(f"\nResults:")
    print(f"  Successful: {len(successful)}")
    print(f"  Failed:     {len(results) - len(successful)}")

    formats = Counter(r.info.format.value for r in successful)
    if formats:
        print(f"\nFormats found:")
        for name, count in formats.most_common():
            print(f"  - {name}: {count}")


if __name__ == "__main__":
    main()
