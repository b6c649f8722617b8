import random

from pyinstrument import Profiler
from multiorder import Collection, OrderingKind, traverse


def build_collection(size, seed=1):
    rng = random.Random(seed)
    return Collection(rng.randint(-size, size) for _ in range(size))


def benchmark_large():
    size = 200_000
    c = build_collection(size)
    print(f"Built collection with {c.size()} elements")

    profiler = Profiler()
    profiler.start()

    N = 5
    print(f"Starting traversals ({N} iterations)...")
    for _ in range(N):
        for kind in OrderingKind:
            traverse(c, kind)
    print("Traversals finished.")

    profiler.stop()

    profiler.print()

    # Optional: save to HTML
    with open("multiorder_profile.html", "w") as f:
        f.write(profiler.output_html())


if __name__ == "__main__":
    benchmark_large()
