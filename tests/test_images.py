import io
import unittest
import os
import sys

# Adiciona root ao path
sys.path.append(os.getcwd())
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from PIL import Image
from core.images import (
    InvalidImageError, collect_images, decode_image, encode_for_pdf, is_accepted, media_type_of,
)
from image_fixtures import FakeUpload, image_bytes, make_entry

PNG_MAGIC = b"\x89PNG"
JPEG_MAGIC = b"\xff\xd8"


class TestDecode(unittest.TestCase):

    def test_dimensoes_naturais(self):
        entry = make_entry(width=40, height=20)
        self.assertEqual((entry.width, entry.height), (40, 20))
        self.assertEqual(entry.size_label, "40×20 px")
        self.assertTrue(entry.thumbnail.startswith(PNG_MAGIC))
        self.assertFalse(entry.transposed)

    def test_miniatura_reduzida(self):
        entry = make_entry(width=2000, height=1000)
        with Image.open(io.BytesIO(entry.thumbnail)) as thumb:
            self.assertLessEqual(max(thumb.size), 240)

    def test_orientacao_exif(self):
        exif = Image.Exif()
        exif[0x0112] = 6  # girar 90°
        entry = make_entry("foto.jpg", 40, 20, fmt="JPEG", media_type="image/jpeg", exif=exif.tobytes())
        self.assertTrue(entry.transposed)
        self.assertEqual((entry.width, entry.height), (20, 40))

    def test_bytes_invalidos(self):
        with self.assertRaises(InvalidImageError):
            decode_image("quebrada.png", b"isto nao e uma imagem", "image/png")


class TestCollect(unittest.TestCase):

    def test_filtra_tipos_e_reporta_falhas(self):
        files = [
            FakeUpload("a.png", image_bytes(), "image/png"),
            FakeUpload("notas.txt", b"texto", "text/plain"),
            FakeUpload("b.jpg", image_bytes(fmt="JPEG"), "image/jpeg"),
            FakeUpload("ruim.png", b"\x89PNG corrompido", "image/png"),
        ]
        seen = set()
        entries, rejected = collect_images(files, seen)

        self.assertEqual([e.name for e in entries], ["a.png", "b.jpg"])
        self.assertEqual(rejected, ["ruim.png"])
        self.assertEqual(len(seen), 4)

    def test_nao_duplica_arquivos_ja_vistos(self):
        files = [FakeUpload("a.png", image_bytes(), "image/png")]
        seen = set()
        first, _ = collect_images(files, seen)
        again, rejected = collect_images(files, seen)
        self.assertEqual(len(first), 1)
        self.assertEqual(again, [])
        self.assertEqual(rejected, [])

    def test_media_type_pela_extensao(self):
        self.assertEqual(media_type_of(FakeUpload("x.jpg", b"", "")), "image/jpeg")
        self.assertEqual(media_type_of(FakeUpload("x.PNG", b"", "IMAGE/PNG")), "image/png")

    def test_is_accepted(self):
        self.assertTrue(is_accepted("image/png"))
        self.assertTrue(is_accepted("image/webp"))
        self.assertFalse(is_accepted("image/svg+xml"))
        self.assertFalse(is_accepted(""))


class TestEncode(unittest.TestCase):

    def test_qualidade_maxima_mantem_original(self):
        entry = make_entry()
        self.assertIs(encode_for_pdf(entry, 1.0), entry.data)

    def test_qualidade_menor_recomprime_em_jpeg(self):
        entry = make_entry(width=200, height=100)
        self.assertTrue(encode_for_pdf(entry, 0.5).startswith(JPEG_MAGIC))

    def test_transparencia_achatada(self):
        entry = make_entry(mode="RGBA", color=(0, 0, 0, 0))
        out = encode_for_pdf(entry, 0.8)
        with Image.open(io.BytesIO(out)) as img:
            self.assertEqual(img.mode, "RGB")
            r, g, b = img.getpixel((5, 5))
            self.assertGreater(min(r, g, b), 240)

    def test_gif_vira_png(self):
        entry = make_entry("anim.gif", fmt="GIF", media_type="image/gif", mode="P", color=1)
        self.assertTrue(encode_for_pdf(entry, 1.0).startswith(PNG_MAGIC))


if __name__ == '__main__':
    unittest.main()
