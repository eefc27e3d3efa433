from setuptools import setup, find_packages

setup(
    name='wildland_fire',
    version='0.1.0',
    packages=find_packages(),
    package_data={
        'wildland_fire.models': ['NFDRS.json'],
    },
    install_requires=[
        'numpy',
    ],
    extras_require={
        'dev': [
            'pytest>=7.0',
            'pytest-cov>=4.0',
            'ruff>=0.1.0',
        ],
    },
    python_requires='>=3.9',
)
