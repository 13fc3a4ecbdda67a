from setuptools import setup, find_packages

setup(
    name="ringmatrix",
    version="1.0",
    description="Generic dense matrices over ring-like element types",
    long_description=("Generic dense matrix value type with equality, element-wise addition and matrix "
                      "multiplication over integers, exact rationals (fractions, sympy), floats and numpy scalars"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.8",
    packages=find_packages(include=["ringmatrix", "ringmatrix.*"]),
    install_requires=["numpy", "sympy"],
    extras_require={"test": ["pytest"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["matrix", "ring", "exact arithmetic", "rational"],
    zip_safe=False,
)
