import pytest
from PIL import Image


@pytest.fixture
def make_image():
    """Returns a helper that writes a real image of the given size (format from the suffix)."""
    def _make(path, size, color="red"):
        path.parent.mkdir(parents=True, exist_ok=True)
        with Image.new("RGB", size, color=color) as im:
            im.save(path)
        return path
    return _make


@pytest.fixture
def photo_tree(tmp_path, make_image):
    """
    root/
      a.jpg          200x100
      notes.txt
      .hidden.png    (hidden, ignored)
      nested/
        b.PNG        50x400
        deeper/
          c.gif      300x300
          broken.bmp (not an image)
    """
    root = tmp_path / "photos"
    make_image(root / "a.jpg", (200, 100))
    (root / "notes.txt").write_text("not a photo")
    make_image(root / ".hidden.png", (10, 10))
    make_image(root / "nested" / "b.PNG", (50, 400))
    make_image(root / "nested" / "deeper" / "c.gif", (300, 300))
    (root / "nested" / "deeper" / "broken.bmp").write_bytes(b"definitely not a bitmap")
    return root
