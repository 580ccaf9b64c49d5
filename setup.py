from setuptools import setup

setup(
    name="tgfgraph",
    version="0.1.0",
    author="Mitchell Kember",
    description="Generic directed graphs with Trivial Graph Format I/O",
    license="MIT",
    packages=["tgfgraph"],
    python_requires=">=3.7",
    install_requires=["PyYAML>=5.1"],
    extras_require={"test": ["pytest>=6"]},
    entry_points={"console_scripts": ["tgf = tgfgraph.cli:main"]},
)
