"""Plantillas de los ficheros generados.

Texto plano con `str.format`; las llaves literales de Rust van duplicadas.
"""

from __future__ import annotations

from core.domain.models import ScaffoldRequest

WORKSPACE_CARGO_TOML = """\
[workspace]
members = [
    "solutions/*/*"
]
resolver = "2"
"""

GITIGNORE = """\
/target
**/target
.env
.DS_Store
**/*.rs.bk
**/input.txt
"""

ENV_TEMPLATE = """\
AOC_SESSION=your_session_cookie_here
"""

DAY_CARGO_TOML = """\
[package]
name = "{package_name}"
version = "0.1.0"
edition = "2021"

[dependencies]
itertools = "0.10.5"
regex = "1.10.3"
"""

MAIN_RS = """\
// Advent of Code {year} - Day {day:02d}

fn main() {{
    let input = include_str!("../input.txt");

    let start = std::time::Instant::now();
    println!("Part 1: {{}}", part1(input));
    println!("Time: {{:.4}}ms", start.elapsed().as_secs_f64() * 1000.0);

    let start = std::time::Instant::now();
    println!("Part 2: {{}}", part2(input));
    println!("Time: {{:.4}}ms", start.elapsed().as_secs_f64() * 1000.0);
}}

fn part1(_input: &str) -> usize {{
    0
}}

fn part2(_input: &str) -> usize {{
    0
}}

#[cfg(test)]
mod tests {{
    use super::*;

    #[test]
    fn test_part1_example() {{
        let example_input = include_str!("../example.txt");
        assert_eq!(part1(example_input), 0);
    }}
}}
"""


def render_day_cargo_toml(request: ScaffoldRequest) -> str:
    return DAY_CARGO_TOML.format(package_name=request.package_name)


def render_main_rs(request: ScaffoldRequest) -> str:
    return MAIN_RS.format(year=request.year, day=request.day)
