import os

from setuptools import find_packages, setup

BASE_PATH = os.path.abspath(os.path.dirname(__file__))

if __name__ == "__main__":
    setup(
        name="persistent-trie",
        license="MIT",
        description="An immutable, copy-on-write prefix tree with structural sharing",
        long_description=open(os.path.join(BASE_PATH, "README.md")).read(),
        long_description_content_type="text/markdown",
        use_scm_version={
            "write_to": "persistent_trie/version.txt",
            "fallback_version": "0.1.0",
        },
        setup_requires=["setuptools_scm"],
        install_requires=[],
        extras_require={
            "test": ["pytest"],
        },
        python_requires=">=3.6",
        include_package_data=True,
        zip_safe=False,
        packages=find_packages(include=["persistent_trie", "persistent_trie.*"]),
        classifiers=[
            "Intended Audience :: Developers",
            "Topic :: Software Development :: Libraries :: Python Modules",
            "Programming Language :: Python :: 3",
            "Programming Language :: Python :: 3 :: Only",
            "Operating System :: OS Independent",
        ],
    )
