from setuptools import find_packages, setup

setup(
    name="book-bench",
    version="0.1.0",
    packages=find_packages(include=["book_bench", "book_bench.*"]),
    description="Single-thread vs two-worker processing of two large books",
    install_requires=[
        "httpx>=0.24",
        "tabulate>=0.9",
        "tqdm>=4.60",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "book-bench=book_bench.bench:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
