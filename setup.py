# setup.py
from setuptools import setup, find_packages

# Version is defined here to avoid import issues during build
__version__ = "1.0.0"

setup(
    name='mhgit',
    version=__version__,
    description='Typed Python interface and CLI for common git repository operations.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    author='Magnus Aa. Hirth',
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    install_requires=[
        'click>=8.1.0',
        'rich>=13.0.0',
        'PyYAML>=6.0',
        'pydantic>=2.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'mhgit = mhgit.cli:cli',
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Version Control :: Git",
        "Topic :: Utilities",
    ],
    python_requires='>=3.10',
    keywords='git, repository, porcelain, cli',
)
