"""
Benchmark de escalabilidade da AVL iterativa.
Mede a altura final e o tempo médio de inserção para vários tamanhos
e compara a altura com o limite teórico de uma AVL (~1.44 * log2(n + 2)).
"""
import logging
import os
import random
import time
from typing import Dict, List, Optional
import numpy as np
import matplotlib
import matplotlib.pyplot as plt

from src.avl.config import AVLConfig
from src.avl.structures.avl_tree import AVLTree

logger = logging.getLogger(__name__)

def run_height_benchmark(sizes: Optional[List[int]] = None, shuffle: bool = True,
                         seed: Optional[int] = None) -> Dict[str, np.ndarray]:
    if sizes is None:
        sizes = AVLConfig.BENCHMARK_SIZES

    rng = random.Random(seed)
    heights = []
    insert_ms = []

    for n in sizes:
        keys = list(range(n))
        if shuffle:
            rng.shuffle(keys)

        tree = AVLTree()
        start = time.perf_counter()
        for key in keys:
            tree.insert(key)
        elapsed = time.perf_counter() - start

        heights.append(tree.height)
        insert_ms.append(elapsed / n * 1000)
        logger.info("n=%6d: altura=%d, inserção média=%.4f ms", n, heights[-1], insert_ms[-1])

    sizes_arr = np.array(sizes, dtype=float)
    return {
        'sizes': sizes_arr,
        'heights': np.array(heights, dtype=int),
        'bounds': AVLConfig.HEIGHT_BOUND_FACTOR * np.log2(sizes_arr + 2),
        'insert_ms': np.array(insert_ms, dtype=float),
    }

def plot_results(results: Dict[str, np.ndarray], filepath: str = AVLConfig.PATH_BENCHMARK_PLOT):
    """Gera o gráfico (altura x limite, tempo de inserção) e salva em filepath."""
    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)

    fig = plt.figure(figsize=(12, 5))

    # Gráfico 1: Altura real contra o limite teórico
    plt.subplot(1, 2, 1)
    plt.plot(results['sizes'], results['heights'], marker='o', label='Altura AVL')
    plt.plot(results['sizes'], results['bounds'], linestyle='--', label='1.44 log2(n+2)')
    plt.xscale('log')
    plt.xlabel('Número de Chaves (N)')
    plt.ylabel('Altura')
    plt.title('Altura AVL: O(log n)')
    plt.legend()
    plt.grid(True)

    # Gráfico 2: Tempo médio de inserção
    plt.subplot(1, 2, 2)
    plt.plot(results['sizes'], results['insert_ms'], marker='x', color='orange', label='Inserção')
    plt.xscale('log')
    plt.xlabel('Número de Chaves (N)')
    plt.ylabel('Tempo Médio (ms)')
    plt.title('Inserção Iterativa')
    plt.legend()
    plt.grid(True)

    plt.savefig(filepath)
    plt.close(fig)
    logger.info("Gráfico salvo em '%s'", filepath)

if __name__ == "__main__":
    matplotlib.use("Agg")
    logging.basicConfig(level=AVLConfig.LOG_LEVEL, format=AVLConfig.LOG_FORMAT)
    plot_results(run_height_benchmark())
