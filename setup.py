from setuptools import setup, find_packages
from os import path
from io import open

setup_dir = path.abspath(path.dirname(__file__))
with open(path.join(setup_dir, 'README.md'),
          encoding='utf-8') as readme_file:
    long_description = readme_file.read()

setup(
    name="pseudosphere_geodesics",
    version="0.1",
    packages=find_packages(),
    include_package_data=True,

    install_requires=[
        "numpy>=1.22",
        "matplotlib>=3.5",
        "scipy"
    ],
    extras_require={
        "test": ["pytest"]
    },

    license="MIT",
    description="""Linked pictures of geodesics in the upper half-plane,
    Poincare disk, Klein disk and pseudosphere models of the hyperbolic
    plane""",

    long_description=long_description,
    long_description_content_type="text/markdown"
)
