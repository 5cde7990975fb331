from setuptools import setup, find_packages

setup(
    name='precision-utility',
    version='0.1.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'pandas',
        'numpy',
        'tqdm',
        'pydantic>=2',
        'PyYAML',
        'psutil'
    ],
    extras_require={
        'test': ['pytest']
    },
    entry_points={
        'console_scripts': [
            'precision-utility=precision_utility.cli:main'
        ]
    },
    author='CDPG',
    description='Column-oriented Precision utility metric for anonymized datasets',
    long_description=open('README.md', encoding='utf-8').read(),
    long_description_content_type='text/markdown'
)
