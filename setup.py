from glob import glob
from setuptools import setup


TESTS_REQUIRE = [
    'pytest',
    'pytest-cov',
    'coverage',
    'flake8',
    'bandit',
    'mypy',
    'safety',
]


setup(
    name='postfix',
    use_scm_version={
        # Source trees without VCS metadata
        'fallback_version': '0.1.0',
    },
    description='Postfix/infix integer expression engine, word counters '
                'and sorting benchmarks',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['postfix', 'wordcount', 'sorting'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.8',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    setup_requires=[
        'setuptools_scm',
    ],
    extras_require={
        'test': TESTS_REQUIRE,
    },
    scripts=glob('bin/*'),
    license='ISC',
)
