from setuptools import setup, find_packages
from version import version


with open("README.rst") as f:
    long_description = f.read()

setup(
    name="SeqExt",
    version=version,
    description="Bi-infinite discrete sequences: extensions of finite vectors, lazy operations and transforms",
    long_description=long_description,
    keywords=['sequence', 'signal', 'extension', 'lazy', 'convolution', 'z-transform'],
    license="Mozilla Public License 2.0 (MPL 2.0)",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)",
        "Development Status :: 3 - Alpha",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research"],
    packages=find_packages(exclude=['tests', 'tests.*']),
    py_modules=['version'],
    install_requires=[
        'numpy'],
    extras_require={
        'tests': [
            'pytest', 'pytest-timeout', 'coverage']
    }
)
