from glob import glob
from setuptools import setup


setup(
    name='calcinput',
    version='0.1.0',
    description='Arithmetic formula calculator and input box models',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['calcinput'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.7',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
