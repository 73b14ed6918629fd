#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Gym backend admin CLI (SQLite)

Commands:
  init                Create every table (safe to re-run)
  export <module>     Export rows of one module as CSV, optionally filtered
  logs                Print recent operation-log rows
  create-admin        Add an admin account for /api/admin/auth/login

Notes:
- The database is chosen the same way the API chooses it (GYM_DB_PATH, then config.yaml).
- Filters use the API query names, e.g. `export careers --filter status=1 --filter search=trainer`.
"""

import argparse
import datetime as dt
import getpass
import os
import sys

import pandas as pd

from gym_backend.db import ensure_schema, get_db_path
from gym_backend.logs import search_logs
from gym_backend.services.admin_auth_svc import admin_auth_service
from gym_backend.services.blog_svc import blog_service
from gym_backend.services.career_svc import career_service
from gym_backend.services.contact_svc import contact_service
from gym_backend.services.franchise_svc import franchise_service
from gym_backend.services.payment_svc import payment_service
from gym_backend.services.user_login_svc import user_login_service
from gym_backend.services.user_svc import subscription_service, user_service

EXPORTERS = {
    "careers": career_service,
    "blogs": blog_service,
    "contact-us": contact_service,
    "franchise": franchise_service,
    "payments": payment_service,
    "user-logins": user_login_service,
    "users": user_service,
    "subscriptions": subscription_service,
}


def parse_filters(pairs):
    out = {}
    for p in pairs or []:
        if "=" not in p:
            raise SystemExit(f"bad --filter {p!r}, expected key=value")
        k, v = p.split("=", 1)
        out[k.strip()] = v.strip()
    return out


def cmd_init(args):
    ensure_schema()
    print(f"[init] schema applied to {get_db_path()}")


def cmd_export(args):
    svc = EXPORTERS[args.module]
    res = svc.export(parse_filters(args.filter))
    if not res.status:
        print(f"[export] failed: {res.message}", file=sys.stderr)
        sys.exit(1)
    df = pd.DataFrame(res.get(svc.list_key) or [])
    out = args.out or f"{args.module}_{dt.datetime.now().strftime('%Y%m%d_%H%M%S')}.csv"
    df.to_csv(out, index=False)
    print(f"[export] {len(df)} rows -> {out}")


def cmd_logs(args):
    total, items = search_logs(args.query, args.action, None, None, 1, args.limit)
    if not items:
        print("(no log rows)")
        return
    pd.set_option("display.width", 160)
    df = pd.DataFrame(items)
    print(df[["ts", "user", "action", "entity_type", "entity_id", "result", "latency_ms"]])
    print(f"\n{len(items)} of {total} rows")


def cmd_create_admin(args):
    password = args.password or getpass.getpass("password: ")
    res = admin_auth_service.create_admin({"email": args.email, "name": args.name, "phone": args.phone, "password": password})
    if not res.status:
        print(f"[create-admin] failed: {res.message}", file=sys.stderr)
        sys.exit(1)
    print(f"[create-admin] admin {res.get('admin')['id']} <{res.get('admin')['email']}>")


def main():
    parser = argparse.ArgumentParser(description="Gym backend admin (SQLite)")
    parser.add_argument("--config", default=None, help="path to config.yaml")
    sub = parser.add_subparsers()

    p_init = sub.add_parser("init", help="create tables")
    p_init.set_defaults(func=cmd_init)

    p_exp = sub.add_parser("export", help="export one module as CSV")
    p_exp.add_argument("module", choices=sorted(EXPORTERS))
    p_exp.add_argument("--filter", action="append", help="key=value, repeatable")
    p_exp.add_argument("--out", required=False, help="output CSV path")
    p_exp.set_defaults(func=cmd_export)

    p_logs = sub.add_parser("logs", help="show recent operation log rows")
    p_logs.add_argument("--action", required=False)
    p_logs.add_argument("--query", required=False)
    p_logs.add_argument("--limit", type=int, default=20)
    p_logs.set_defaults(func=cmd_logs)

    p_adm = sub.add_parser("create-admin", help="add an admin account")
    p_adm.add_argument("email")
    p_adm.add_argument("--name", required=True)
    p_adm.add_argument("--phone", required=False)
    p_adm.add_argument("--password", required=False, help="prompted when omitted")
    p_adm.set_defaults(func=cmd_create_admin)

    args = parser.parse_args()
    if args.config:
        os.environ["GYM_CONFIG_PATH"] = args.config
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
