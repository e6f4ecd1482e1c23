"""Widely depended-upon crates on crates.io, most common first.

Hand-curated starter list without frequency counts. Replace it with a
ranking computed from an index checkout by running
``cargo-prefetch rank <index-path> -o src/top_crates.py``.
"""

from typing import Tuple

TOP_CRATES: Tuple[str, ...] = (
    "serde",
    "serde_json",
    "log",
    "rand",
    "thiserror",
    "anyhow",
    "lazy_static",
    "regex",
    "tokio",
    "clap",
    "libc",
    "chrono",
    "futures",
    "serde_derive",
    "bytes",
    "syn",
    "quote",
    "proc-macro2",
    "reqwest",
    "byteorder",
    "itertools",
    "once_cell",
    "env_logger",
    "tracing",
    "base64",
    "bitflags",
    "hex",
    "url",
    "async-trait",
    "structopt",
    "num-traits",
    "uuid",
    "failure",
    "toml",
    "tempfile",
    "sha2",
    "error-chain",
    "hyper",
    "parking_lot",
    "time",
    "walkdir",
    "smallvec",
    "indexmap",
    "tokio-util",
    "futures-util",
    "derive_more",
    "rayon",
    "crossbeam",
    "memchr",
    "cfg-if",
    "pin-project",
    "semver",
    "percent-encoding",
    "http",
    "tracing-subscriber",
    "ring",
    "rustls",
    "num",
    "num-derive",
    "num_cpus",
    "dirs",
    "getrandom",
    "criterion",
    "proptest",
    "quickcheck",
    "pretty_assertions",
    "assert_cmd",
    "predicates",
    "mockall",
    "wasm-bindgen",
    "js-sys",
    "web-sys",
    "winapi",
    "nix",
    "colored",
    "ansi_term",
    "atty",
    "termcolor",
    "indicatif",
    "console",
    "dialoguer",
    "csv",
    "flate2",
    "zip",
    "tar",
    "glob",
    "ignore",
    "notify",
    "crossbeam-channel",
    "dashmap",
    "arc-swap",
    "ahash",
    "hashbrown",
    "fnv",
    "rustc-hash",
    "serde_yaml",
    "serde_with",
    "bincode",
    "rmp-serde",
    "prost",
    "tonic",
    "protobuf",
    "actix-web",
    "actix-rt",
    "axum",
    "warp",
    "rocket",
    "tower",
    "tower-http",
    "hyper-tls",
    "native-tls",
    "openssl",
    "tokio-tungstenite",
    "tungstenite",
    "mio",
    "async-std",
    "futures-core",
    "futures-channel",
    "futures-lite",
    "pin-project-lite",
    "strum",
    "strum_macros",
    "paste",
    "static_assertions",
    "memmap2",
    "libloading",
    "bytemuck",
    "image",
    "nalgebra",
    "ndarray",
    "num-bigint",
    "rust_decimal",
    "ordered-float",
    "approx",
    "petgraph",
    "unicode-segmentation",
    "unicode-width",
    "unicode-normalization",
    "encoding_rs",
    "sha1",
    "md5",
    "md-5",
    "hmac",
    "aes",
    "rsa",
    "ed25519-dalek",
    "blake2",
    "blake3",
    "crc32fast",
    "digest",
    "generic-array",
    "typenum",
    "zeroize",
    "subtle",
    "rand_core",
    "rand_chacha",
    "nom",
    "pest",
    "pest_derive",
    "handlebars",
    "tera",
    "askama",
    "pulldown-cmark",
    "scraper",
    "quick-xml",
    "xml-rs",
    "roxmltree",
    "toml_edit",
    "config",
    "dotenv",
    "dotenvy",
    "directories",
    "home",
    "which",
    "shellexpand",
    "sysinfo",
    "signal-hook",
    "ctrlc",
    "crossterm",
    "termion",
    "ratatui",
    "slog",
    "fern",
    "simplelog",
    "log4rs",
    "tracing-log",
    "opentelemetry",
    "metrics",
    "prometheus",
    "sqlx",
    "diesel",
    "rusqlite",
    "postgres",
    "tokio-postgres",
    "redis",
    "mongodb",
    "r2d2",
    "lru",
    "cached",
    "moka",
    "humantime",
    "chrono-tz",
    "jsonwebtoken",
    "oauth2",
    "cookie",
    "mime",
    "mime_guess",
    "httparse",
    "http-body",
    "h2",
    "tokio-rustls",
    "webpki-roots",
    "rustls-pemfile",
    "socket2",
    "ipnet",
    "rustc_version",
    "cc",
    "pkg-config",
    "bindgen",
    "cmake",
    "vcpkg",
    "version_check",
    "autocfg",
    "darling",
    "proc-macro-error",
    "proc-macro-hack",
    "synstructure",
    "heck",
    "convert_case",
    "textwrap",
    "shlex",
    "clap_complete",
    "getopts",
    "wasm-bindgen-futures",
    "console_error_panic_hook",
    "serde-wasm-bindgen",
    "serde_bytes",
    "serde_repr",
    "serde_urlencoded",
    "schemars",
    "validator",
    "insta",
    "rstest",
    "serial_test",
    "tokio-test",
    "mockito",
)
