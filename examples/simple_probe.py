"""
Simple example of using imageprobe to inspect an image
"""

from pathlib import Path
from imageprobe import FormatDetector, probe_file


def main():
    # Replace with actual image path
    image_path = Path("example.jpg")

    if not image_path.exists():
        print(f"Error: {image_path} not found")
        print("Please provide a valid image path")
        return

    print(f"Probing {image_path}...")
    print("-" * 60)

    result = probe_file(image_path)

    if result.success:
        info = result.info
        print("✓ Success!\n")
        print(f"Format:         {info.format.value}")
        print(f"Content type:   {FormatDetector.get_content_type(info.format)}")
        print(f"Dimensions:     {info.width}x{info.height}px")
        print(f"Orientation:    {info.orientation.value}")
        print(f"File size:      {result.file_size} bytes")
    else:
        print(f"✗ Failed: {result.error}")


if __name__ == "__main__":
    main()
