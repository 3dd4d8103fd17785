from glob import glob
from setuptools import setup


setup(
    name='infixrpn',
    use_scm_version={
        # Building outside a git checkout
        'fallback_version': '0.1.0',
    },
    description='Infix expression to RPN converter and evaluator',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['infixrpn'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.8',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
