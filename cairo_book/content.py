"""Static guide and navigation content for the Cairo book.

These tuples are the defaults used whenever ``config/book.yaml`` does not
provide its own ``guides`` or ``navigation`` block. Hrefs are unique across the
whole navigation tree.
"""

from __future__ import annotations

from .config.models import GuideEntry, NavigationGroup, NavigationLink

GUIDES: tuple[GuideEntry, ...] = (
    GuideEntry(
        title="Common Programming Concepts",
        description=(
            "This chapter covers concepts that appear in almost every programming "
            "language and how they work in Cairo."
        ),
        href="/authentication",
    ),
    GuideEntry(
        title="Understanding Ownership",
        description=(
            "Cairo is a language built around a linear type system that allows us "
            "to statically ensure that in every Cairo program, a value is used "
            "exactly once."
        ),
        href="/pagination",
    ),
    GuideEntry(
        title="Enums and Pattern Matching",
        description=(
            'Enums, short for "enumerations," are a way to define a custom data '
            "type that consists of a fixed set of named values, called variants."
        ),
        href="/errors",
    ),
    GuideEntry(
        title="Starknet smart contracts",
        description=(
            "Starknet contracts, in simple words, are programs that can run on "
            "the Starknet VM."
        ),
        href="/webhooks",
    ),
)


def _group(title: str, *links: tuple[str, str]) -> NavigationGroup:
    return NavigationGroup(
        title=title,
        links=tuple(NavigationLink(title=label, href=href) for label, href in links),
    )


NAVIGATION: tuple[NavigationGroup, ...] = (
    _group(
        "The Cairo Programming Language",
        ("Foreword", "/ch00-01-foreword"),
        ("Introduction", "/ch00-00-introduction"),
    ),
    _group(
        "Getting Started",
        ("Installation", "/ch01-01-installation"),
        ("Hello, World!", "/ch01-02-hello-world"),
        ("Hello, Scarb!", "/ch01-03-hello-scarb"),
    ),
    _group(
        "Common Programming Concepts",
        ("Common Programming Concepts", "/ch02-00-common-programming-concepts"),
        ("Variables and Mutability", "/ch02-01-variables-and-mutability"),
        ("Data Types", "/ch02-02-data-types"),
        ("Functions", "/ch02-03-functions"),
        ("Comments", "/ch02-04-comments"),
        ("Control Flow", "/ch02-05-control-flow"),
        ("Common Collections", "/ch02-06-common-collections"),
    ),
    _group(
        "Understanding Ownership",
        ("Understanding Ownership", "/ch03-00-understanding-ownership"),
        ("What is Ownership?", "/ch03-01-what-is-ownership"),
        ("References and Snapshots", "/ch03-02-references-and-snapshots"),
    ),
    _group(
        "Using Structs to Structure Related Data",
        (
            "Using Structs to Structure Related Data",
            "/ch04-00-using-structs-to-structure-related-data",
        ),
        (
            "Defining and Instantiating Structs",
            "/ch04-01-defining-and-instantiating-structs",
        ),
        (
            "An Example Program Using Structs",
            "/ch04-02-an-example-program-using-structs",
        ),
        ("Method Syntax", "/ch04-03-method-syntax"),
    ),
    _group(
        "Enums and Pattern Matching",
        ("Enums and Pattern Matching", "/ch05-00-enums-and-pattern-matching"),
        ("Enums", "/ch05-01-enums"),
        (
            "The Match Control Flow Construct",
            "/ch05-02-the-match-control-flow-construct",
        ),
    ),
    _group(
        "Managing Cairo Projects with Packages, Crates and Modules",
        (
            "Managing Cairo Projects with Packages, Crates and Modules",
            "/ch06-00-managing-cairo-projects-with-packages-crates-and-modules",
        ),
        ("Packages and Crates", "/ch06-01-packages-and-crates"),
        (
            "Defining Modules to Control Scope",
            "/ch06-02-defining-modules-to-control-scope",
        ),
        (
            "Paths for Referring to an Item in the Module Tree",
            "/ch06-03-paths-for-referring-to-an-item-in-the-module-tree",
        ),
        (
            "Bringing Paths into Scope with the 'use' Keyword",
            "/ch06-04-bringing-paths-into-scope-with-the-use-keyword",
        ),
        (
            "Separating Modules into Different Files",
            "/ch06-05-separating-modules-into-different-files",
        ),
    ),
    _group(
        "Generic Data Types",
        ("Generic Types", "/ch07-00-generic-types-and-traits"),
        ("Generic Functions", "/ch07-01-generic-data-types"),
        ("Traits in Cairo", "/ch07-02-traits-in-cairo"),
    ),
    _group(
        "Testing Cairo Programs",
        ("Testing Cairo Programs", "/ch08-00-testing-cairo-programs"),
        ("How To Write Tests", "/ch08-01-how-to-write-tests"),
        ("Testing Organization", "/ch08-02-test-organization"),
    ),
    _group(
        "Error Handling",
        ("Error Handling", "/ch09-00-error-handling"),
        ("Unrecoverable Errors with panic", "/ch09-01-unrecoverable-errors-with-panic"),
        ("Recoverable Errors with Result", "/ch09-02-error-handling"),
    ),
    _group(
        "Starknet smart contracts",
        ("Starknet Smart Contracts", "./ch99-00-starknet-smart-contracts"),
        ("Writing Starknet Contracts", "./ch99-01-writing-starknet-contracts"),
        (
            "ABIs and Cross-contract Interactions",
            "./ch99-02-00-abis-and-cross-contract-interactions",
        ),
        ("ABIs and Interfaces", "./ch99-02-01-abis-and-interfaces"),
        (
            "Contract Dispatchers, Library Dispachers and system calls",
            "./ch99-02-02-contract-dispatcher-library-dispatcher-and-system-calls",
        ),
    ),
    _group(
        "Appendix",
        ("Appendix", "/appendix-00"),
        ("A - Useful Development Tools", "/appendix-04-useful-development-tools"),
    ),
)


__all__ = ["GUIDES", "NAVIGATION"]
