#!/usr/bin/env python3
"""
Basic gitolite-config usage example.

Builds two repo stanzas and prints the config and gitweb description lines.
Run with: python examples/basic_usage.py
"""

import logging

from gitolite_config import (
    GitoliteConfigError,
    InvalidPermissionError,
    Repo,
    configure_logging,
)

print("=== gitolite-config Basic Usage Example ===\n")

# Trace every rule that is added
configure_logging(level=logging.INFO, repo_level=logging.DEBUG)

# 1. Grants, a deny rule and rules after it
print("1. Building repo stanzas...")
website = Repo("website")
website.add_permission("RW+", "", "@admins")
website.add_permission("RW", "refs/heads/dev/", ["alice", "bob"])
website.add_permission("-", "refs/heads/release", "bob")
website.add_permission("RW", "refs/heads/release", "alice")
website.add_permission("R", "", "@all", "gitweb")
website.set_git_config("hooks.mailinglist", "web@example.com")
website.set_gitolite_option("deny-rules", 1)
website.owner = "Web Team"
website.description = "Company website"

tools = Repo("tools")
tools.add_permission("RW+CD", "", ["@devs"])
tools.add_permission("R", "", ["@all"])

print(f"   {website.name}: {len(website.permission_groups)} rule groups")
print(f"   {tools.name}: {len(tools.permission_groups)} rule group")

# 2. Invalid permissions are rejected without touching the repo
print("\n2. Testing permission validation...")
try:
    tools.add_permission("W", "", ["mallory"])
except InvalidPermissionError as e:
    print(f"   Caught InvalidPermissionError: {e}")
    print(f"   Code: {e.code}, Permission: {e.permission}")
except GitoliteConfigError as e:
    print(f"   Unexpected error: {e}")

# 3. Render
print("\n3. Rendering gitolite.conf...\n")
print("\n".join(repo.render() for repo in (website, tools)))

print("4. Rendering gitweb descriptions...\n")
for repo in (website, tools):
    line = repo.gitweb_description()
    if line is not None:
        print(f"   {line}")
