import unittest
import os
import sys

# Adiciona root ao path
sys.path.append(os.getcwd())

from core.utils import safe_slug, output_filename, move_item, move_to, remove_at, reorder_by_labels


class TestUtils(unittest.TestCase):

    def test_safe_slug(self):
        self.assertEqual(safe_slug("Arquivo de Teste!"), "arquivo_de_teste")
        self.assertEqual(safe_slug("Ação & Reação"), "acao_reacao")
        self.assertEqual(safe_slug("!!!"), "arquivo")

    def test_output_filename(self):
        self.assertEqual(output_filename("", "imagens-convertidas"), "imagens-convertidas.pdf")
        self.assertEqual(output_filename("   ", "imagens-convertidas"), "imagens-convertidas.pdf")
        self.assertEqual(output_filename(".pdf", "padrao"), "padrao.pdf")
        self.assertEqual(output_filename("Relatório Final", "padrao"), "relatorio_final.pdf")
        self.assertEqual(output_filename("scan.PDF", "padrao"), "scan.pdf")
        self.assertEqual(output_filename("album.pdf", "padrao"), "album.pdf")

    def test_move_item(self):
        items = ["a", "b", "c"]
        move_item(items, 0, 1)
        self.assertEqual(items, ["b", "a", "c"])
        move_item(items, 2, -1)
        self.assertEqual(items, ["b", "c", "a"])
        # fora dos limites: nada muda
        move_item(items, 0, -1)
        move_item(items, 2, 1)
        self.assertEqual(items, ["b", "c", "a"])

    def test_move_to(self):
        items = ["a", "b", "c", "d"]
        move_to(items, 0, 2)
        self.assertEqual(items, ["b", "c", "a", "d"])
        move_to(items, 3, 0)
        self.assertEqual(items, ["d", "b", "c", "a"])
        move_to(items, 1, 99)
        self.assertEqual(items, ["d", "c", "a", "b"])
        move_to(items, 7, 0)
        self.assertEqual(items, ["d", "c", "a", "b"])

    def test_remove_at(self):
        items = ["a", "b"]
        remove_at(items, 0)
        self.assertEqual(items, ["b"])
        remove_at(items, 5)
        self.assertEqual(items, ["b"])

    def test_reorder_by_labels(self):
        items = ["a", "b", "c"]
        labels = ["1. a", "2. b", "3. c"]
        self.assertEqual(reorder_by_labels(items, labels, ["3. c", "1. a", "2. b"]), ["c", "a", "b"])
        # resposta vazia ou que não é permutação mantém a ordem
        self.assertEqual(reorder_by_labels(items, labels, None), items)
        self.assertEqual(reorder_by_labels(items, labels, ["1. a", "2. b"]), items)
        self.assertEqual(reorder_by_labels(items, labels, ["1. a", "2. b", "9. z"]), items)


if __name__ == '__main__':
    unittest.main()
