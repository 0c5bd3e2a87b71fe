from setuptools import setup, find_packages

setup(
    name='fuelcalc',
    version='0.1.0',
    packages=find_packages(),
    package_data={
        'fuelcalc.models': ['FuelPresets.json'],
    },
    install_requires=[
        'numpy',
        'pandas',
        'matplotlib',
        'pyarrow',
    ],
    extras_require={
        'dev': [
            'pytest>=7.0',
            'pytest-cov>=4.0',
            'ruff>=0.1.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'fuelcalc-run=fuelcalc.run_scenario:main',
        ],
    },
    python_requires='>=3.9',
)
