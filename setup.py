from pathlib import Path
from setuptools import setup, find_packages


HERE = Path(__file__).parent
LONG_DESCRIPTION = (HERE / "README.md").read_text(encoding="utf-8")

setup(
    name="tfidf-weighting",
    version="0.1.0",
    description="Term frequency and inverse document frequency weighting for tokenized corpora",
    long_description=LONG_DESCRIPTION,
    long_description_content_type="text/markdown",
    license="MIT",
    python_requires=">=3.7",
    keywords=[
        "tf-idf",
        "tfidf",
        "information-retrieval",
        "feature-extraction",
        "natural-language-processing",
    ],
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Topic :: Scientific/Engineering :: Artificial Intelligence",
        "Topic :: Text Processing :: General",
    ],
    package_dir={"": "src"},
    packages=find_packages(where="src", exclude=("tests",)),
    install_requires=[
        "nltk>=3.5",
        "numpy",
        "pandas",
        "scikit-learn",
        "tqdm",
        "typing_extensions",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
)
