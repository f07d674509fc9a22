#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""Built-in English word table.

A word's position in BUILTIN_WORDS is its permanent index: built-in tokens and
the 11-bit indices of the packed format are both derived from it, so existing
entries never move. Append-only.
"""

from __future__ import annotations

from typing import Tuple

BUILTIN_WORDS: Tuple[str, ...] = (
    "abandon", "ability", "able", "aboard", "about", "above", "absence", "absolute", "absorb",
    "abstract", "abuse", "academic", "accept", "access", "accident", "accord", "account",
    "accurate", "accuse", "achieve", "acquire", "action", "active", "actual", "address",
    "adjust", "advance", "advantage", "adverse", "advice", "advise", "affect", "afford",
    "afraid", "after", "again", "against", "agency", "agenda", "agent", "agree", "ahead",
    "aimed", "alarm", "album", "alert", "alien", "align", "alive", "alley", "allow", "almost",
    "alone", "along", "already", "also", "alter", "although", "always", "amazing", "among",
    "amount", "ancient", "anger", "angle", "animal", "ankle", "annex", "another", "answer",
    "anybody", "anymore", "anyone", "anywhere", "apart", "appeal", "appear", "apply",
    "approach", "area", "arena", "argue", "arise", "around", "array", "article", "aside",
    "aspect", "asset", "assign", "assume", "atlas", "attach", "attack", "attend", "audit",
    "author", "avoid", "award", "away", "awful", "back", "basic", "basis", "batch", "battle",
    "beach", "beauty", "because", "been", "before", "began", "begin", "behind", "being",
    "believe", "belong", "below", "bench", "benefit", "best", "better", "between", "beyond",
    "billion", "birth", "black", "blade", "blame", "bland", "blank", "blast", "blaze", "bleed",
    "blend", "bless", "blind", "block", "blood", "blown", "board", "body", "book", "boost",
    "both", "bother", "bottle", "bottom", "bounce", "bound", "boxer", "brain", "branch",
    "brand", "brave", "break", "breath", "breed", "bridge", "brief", "bring", "broad", "broke",
    "broken", "brook", "brought", "brown", "brush", "budget", "build", "built", "bunch",
    "burden", "burst", "business", "button", "buyer", "buying", "cabin", "cable", "call",
    "camera", "cancel", "cannot", "canvas", "carbon", "care", "career", "careful", "case",
    "castle", "cattle", "caught", "center", "central", "centre", "century", "chain", "chair",
    "chalk", "chance", "change", "chaos", "chapter", "characters", "charge", "charity", "charm",
    "chart", "chase", "cheap", "check", "cheek", "cheer", "chess", "chief", "child", "china",
    "choice", "choir", "choose", "chose", "chosen", "chronic", "chunk", "cinema", "circle",
    "citizen", "city", "civic", "civil", "claim", "class", "clause", "clean", "clear",
    "clearly", "clerk", "click", "cliff", "climate", "climb", "close", "closet", "cloud",
    "club", "coast", "coffee", "collar", "color", "column", "combat", "come", "comfort",
    "comic", "comma", "comment", "commit", "common", "commonly", "company", "compare",
    "complex", "concept", "conduct", "confirm", "contact", "content", "contest", "control",
    "coral", "correct", "cost", "cotton", "could", "count", "country", "county", "couple",
    "course", "court", "cover", "crack", "craft", "crane", "crash", "crazy", "cream", "create",
    "credit", "creek", "crime", "cross", "crowd", "crown", "cruise", "crush", "culture",
    "current", "curve", "cycle", "daily", "damage", "dance", "dark", "data", "datum", "days",
    "deal", "dealing", "dear", "death", "debate", "debut", "decide", "decided", "decor", "deep",
    "defend", "defense", "define", "degree", "delay", "delta", "demand", "dense", "depot",
    "depth", "derby", "despite", "detail", "develop", "devil", "differ", "digital", "dinner",
    "direct", "dirty", "discuss", "disease", "distant", "ditch", "divide", "divided", "does",
    "dollar", "donate", "double", "doubt", "dough", "down", "draft", "drain", "drama", "drawn",
    "dream", "drink", "drive", "driving", "drove", "dusky", "dusty", "dynamic", "each", "eager",
    "early", "earth", "easily", "economy", "effect", "effort", "eight", "either", "element",
    "elite", "else", "email", "embrace", "emotion", "empty", "enable", "ending", "ends",
    "enemy", "energy", "engine", "english", "enhance", "enjoy", "enough", "ensure", "enter",
    "entire", "entry", "equal", "error", "escape", "essay", "estate", "even", "event", "ever",
    "every", "evolve", "exact", "example", "exceed", "exclude", "excluding", "execute",
    "exhaust", "exist", "expect", "expire", "explore", "export", "express", "extend", "extra",
    "extreme", "face", "fact", "factor", "fail", "faint", "fair", "faith", "fall", "false",
    "family", "famous", "fancy", "fast", "fatal", "feast", "federal", "feel", "feeling", "feet",
    "female", "fence", "fewer", "field", "fifth", "fight", "figure", "file", "fill", "final",
    "finance", "find", "finger", "fire", "firm", "first", "five", "fixed", "flame", "flash",
    "fleet", "flesh", "float", "floor", "flour", "flown", "focus", "follow", "food", "foot",
    "force", "forest", "forge", "form", "format", "forward", "foster", "found", "four",
    "fourth", "frame", "frank", "fraud", "free", "freedom", "frequently", "fresh", "friend",
    "from", "front", "frost", "frozen", "fruit", "full", "fully", "fund", "funny", "future",
    "game", "garden", "gate", "gave", "gear", "gender", "general", "genuine", "getting",
    "giant", "girl", "give", "given", "giving", "glad", "glare", "glass", "global", "globe",
    "glory", "glove", "goal", "goes", "going", "gold", "golden", "gone", "good", "grace",
    "grade", "grain", "grand", "grant", "grasp", "grass", "grave", "great", "green", "greet",
    "grief", "grind", "groan", "gross", "ground", "group", "grove", "grow", "growth", "guard",
    "guess", "guest", "guide", "guild", "guilt", "guise", "gulf", "gusto", "half", "hall",
    "hand", "happy", "hard", "hardly", "harm", "harsh", "have", "head", "health", "heart",
    "heat", "heavy", "height", "held", "help", "here", "hero", "hidden", "high", "hill", "hint",
    "hold", "hole", "home", "honest", "hope", "hotel", "hour", "hourly", "house", "however",
    "huge", "human", "humor", "hundred", "hunger", "hurry", "idea", "image", "imagine",
    "impact", "imply", "import", "improve", "inch", "include", "income", "indeed", "index",
    "initial", "inject", "injure", "inner", "input", "insist", "instant", "integer", "intense",
    "intent", "into", "invest", "iron", "island", "issue", "items", "itself", "join", "joined",
    "judge", "juice", "juicy", "jump", "jungle", "junior", "just", "justice", "keep", "keeping",
    "kind", "king", "kingdom", "know", "knowing", "known", "label", "land", "language", "laser",
    "last", "late", "latest", "laugh", "launch", "layer", "lead", "leader", "league", "lean",
    "learn", "lease", "leave", "left", "legal", "lemon", "less", "lessen", "letter", "level",
    "life", "light", "like", "limit", "line", "linen", "liner", "link", "liquid", "list",
    "listen", "little", "live", "liver", "living", "load", "loan", "local", "locate", "lock",
    "lodge", "loft", "logic", "long", "longer", "look", "looked", "loose", "lose", "losing",
    "loss", "lost", "loud", "love", "lower", "loyal", "luck", "lucky", "lure", "luxury", "made",
    "magic", "mail", "main", "major", "make", "maker", "manage", "manor", "manual", "maple",
    "march", "mark", "market", "mass", "match", "math", "matter", "mayor", "mean", "media",
    "meet", "member", "mercy", "merit", "metal", "method", "middle", "mild", "mile", "mill",
    "mind", "mine", "minor", "minus", "mirror", "miss", "mixed", "mobile", "mode", "model",
    "modern", "moment", "money", "month", "mood", "moon", "moral", "more", "most", "mostly",
    "mother", "motion", "motor", "mount", "mouse", "mouth", "move", "movie", "much", "murder",
    "music", "must", "mutual", "myth", "naive", "name", "nation", "nature", "near", "need",
    "nerve", "never", "news", "next", "nice", "night", "nine", "noble", "noise", "none", "norm",
    "normal", "north", "note", "nothing", "notice", "novel", "null", "number", "nurse", "nylon",
    "object", "oblige", "obtain", "obvious", "occur", "offer", "office", "often", "okay",
    "once", "ongoing", "online", "only", "open", "openly", "opinion", "option", "oral",
    "orange", "order", "other", "ought", "ours", "outer", "outlet", "output", "outside", "over",
    "overall", "owner", "ozone", "pace", "page", "pain", "paint", "pair", "panel", "paper",
    "parent", "park", "part", "pass", "past", "path", "patrol", "pause", "peace", "peak",
    "pearl", "pedal", "people", "permit", "person", "phase", "phone", "photo", "phrase", "pick",
    "piece", "pile", "pilot", "pine", "pipe", "pirate", "pitch", "pixel", "pizza", "place",
    "plain", "plan", "plane", "planet", "plant", "plate", "play", "player", "plaza", "plead",
    "please", "plenty", "plot", "pluck", "plumb", "plume", "plus", "plush", "pocket", "point",
    "polar", "police", "policy", "pool", "poor", "popular", "port", "portal", "post", "potato",
    "pound", "pour", "power", "prefix", "present", "press", "pretty", "prevent", "prey",
    "price", "pride", "prime", "print", "prior", "prison", "prize", "probe", "problem",
    "process", "produce", "product", "profit", "program", "promise", "proof", "prose",
    "protect", "proud", "prove", "provide", "psalm", "public", "pull", "pulse", "pump", "pupil",
    "pure", "purple", "pursue", "push", "puts", "puzzle", "quality", "queen", "query", "quest",
    "queue", "quick", "quickly", "quiet", "quota", "quote", "race", "radar", "radio", "rage",
    "rain", "raise", "rally", "ranch", "random", "range", "rank", "rapid", "rarely", "rate",
    "razor", "reach", "read", "real", "reality", "reason", "rebel", "recap", "receive",
    "recent", "reduce", "refer", "reform", "refuse", "region", "reign", "related", "relax",
    "release", "rely", "remain", "remind", "remove", "rent", "repay", "repeat", "repel",
    "reply", "require", "rescue", "resolve", "respect", "respond", "rest", "restore", "return",
    "revenue", "review", "reward", "rich", "ride", "rider", "rifle", "right", "rigid", "ring",
    "rise", "rising", "risk", "risky", "rival", "river", "road", "robot", "rock", "rocket",
    "rocky", "role", "roll", "roof", "room", "root", "rose", "rouge", "rough", "round", "route",
    "rover", "royal", "rugby", "ruin", "rule", "ruler", "rural", "rush", "safe", "sail", "salt",
    "same", "sample", "savage", "save", "saving", "says", "scale", "scene", "science", "score",
    "scout", "seal", "second", "secret", "section", "sector", "seek", "seize", "select", "self",
    "sell", "send", "senior", "sent", "series", "serve", "service", "settle", "seven",
    "several", "shade", "shake", "shall", "shame", "shape", "share", "sharp", "shelf", "shell",
    "shift", "shirt", "shock", "shore", "short", "should", "shout", "side", "sight", "sign",
    "signal", "silent", "silk", "silver", "similar", "simple", "since", "sing", "single",
    "sink", "sister", "site", "sixth", "size", "sized", "skill", "skin", "skip", "slate",
    "slave", "sleep", "slice", "slide", "slope", "slow", "slowly", "small", "smart", "smell",
    "smile", "smoke", "snap", "snow", "society", "soft", "soil", "solar", "sold", "sole",
    "solid", "solve", "some", "somehow", "someone", "song", "soon", "sorry", "sort", "soul",
    "soup", "source", "south", "space", "span", "spare", "spark", "speak", "spec", "special",
    "speech", "speed", "spend", "spice", "spill", "spin", "spine", "spirit", "spit", "split",
    "spoke", "spook", "sport", "spot", "spray", "spread", "squad", "square", "stable", "stack",
    "staff", "stage", "stake", "stall", "stand", "star", "stare", "start", "started", "state",
    "static", "station", "status", "stay", "stays", "steel", "steep", "steer", "stem", "step",
    "stick", "still", "stir", "stock", "stone", "stood", "stop", "store", "storm", "story",
    "stove", "stream", "street", "strict", "string", "strong", "struck", "struct", "stuck",
    "student", "studio", "study", "stuff", "stunt", "stupid", "style", "subject", "submit",
    "success", "such", "sudden", "suffer", "sugar", "suit", "suite", "summer", "super",
    "supply", "support", "sure", "surface", "surge", "swamp", "swap", "swear", "sweet", "swift",
    "swing", "switch", "sword", "sync", "syrup", "table", "take", "tale", "talent", "talk",
    "tall", "target", "task", "teacher", "team", "tear", "tech", "tell", "test", "text", "than",
    "that", "their", "them", "then", "there", "these", "they", "thick", "thing", "think",
    "third", "this", "thorn", "those", "though", "threat", "three", "threw", "throat", "throw",
    "tick", "ticket", "tide", "tied", "ties", "tiger", "tight", "tile", "till", "tilt", "time",
    "tinker", "tiny", "tire", "tired", "tissue", "title", "today", "together", "token", "toll",
    "tomato", "tone", "tongue", "tonight", "took", "tool", "tops", "torn", "total", "totally",
    "touch", "tough", "tour", "toward", "towards", "towel", "town", "track", "trade", "trail",
    "train", "trait", "travel", "tree", "trend", "trial", "tribe", "trick", "tried", "trim",
    "trio", "trip", "triple", "trouble", "truce", "truck", "true", "truly", "trust", "truth",
    "tube", "tumor", "tune", "turn", "tutor", "twice", "twin", "type", "typical", "unborn",
    "under", "union", "unique", "unity", "until", "update", "upon", "upper", "upset", "upward",
    "urban", "usage", "used", "useful", "user", "usual", "usually", "utter", "valid", "value",
    "vary", "vast", "veil", "vent", "very", "video", "view", "vigil", "village", "viral",
    "virus", "visit", "visual", "vital", "vivid", "voice", "vote", "voter", "wade", "wait",
    "walk", "wall", "ward", "warm", "warn", "wars", "wash", "waste", "watch", "water", "wave",
    "ways", "weak", "wear", "weary", "weave", "week", "weird", "well", "were", "west", "whale",
    "what", "wheat", "wheel", "when", "where", "whether", "which", "while", "white", "whole",
    "whose", "wide", "width", "wife", "wild", "will", "wind", "wine", "winter", "wire", "wise",
    "wish", "with", "within", "without", "woke", "wolf", "women", "wonder", "wood", "wooden",
    "word", "words", "work", "worker", "working", "world", "worn", "worry", "worse", "worst",
    "worth", "would", "wound", "wrap", "write", "writing", "written", "wrote", "yacht", "yard",
    "year", "yellow", "young", "your", "youth", "zebra", "zero", "zilch", "zonal", "zone",
)

BUILTIN_WORD_COUNT = len(BUILTIN_WORDS)
