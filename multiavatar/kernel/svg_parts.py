"""
SVG skeletons for the avatar parts.

Every color slot is written as a literal color ending in ";" so a template is
drawable on its own. The colorizer treats each "#...;" run as one slot, in
document order, and the themes supply the replacement values.

env and head are shared by all characters unless a character overrides them.
"""

STROKE = "stroke-linecap:round;stroke-linejoin:round;stroke-width:"

TORSO = "m51.4 211.5a115.5 115.5 0 0 0 128.2 0 115.5 115.5 0 0 0-38.2-15.9"

ENV = (
    '<path d="M33.83,33.83a115.5,115.5,0,1,1,0,163.34,115.49,115.49,0,0,1,0-163.34Z" '
    + 'style="fill:#ff2f2b;"/>'
)

HEAD = (
    '<path d="m115.5 51.75a63.75 63.75 0 0 0-10.37 126.66v14.09a115.5 115.5 0 0 0-53.73 19.02 '
    + '115.5 115.5 0 0 0 128.2 0 115.5 115.5 0 0 0-53.73-19.02v-14.09a63.75 63.75 0 0 0-10.37-126.66z" '
    + 'style="fill:#fff;stroke:black;' + STROKE + '3;"/>'
)

SHARED = {
    "env": ENV,
    "head": HEAD,
}

SVG_PARTS = {
    # Robo
    "00": {
        "head": (
            '<path d="m66 60h99v96c0 14-10 24-24 24h-15v14a115.5 115.5 0 0 1 53.6 17.5 115.5 115.5 0 0 1-128.2 0 '
            + '115.5 115.5 0 0 1 53.6-17.5v-14h-15c-14 0-24-10-24-24z" style="fill:#fff;stroke:black;' + STROKE + '3;"/>'
        ),
        "clo": (
            '<path d="m141.4 195.6a115.5 115.5 0 0 1 38.2 15.9 115.5 115.5 0 0 1-128.2 0 115.5 115.5 0 0 1 38.2-15.9z" '
            + 'style="fill:#fff;"/>'
            + '<path d="m101.3 202h28.4v9.5h-28.4z" style="fill:#000;"/>'
        ),
        "top": (
            '<path d="m115.5 22v38" style="fill:none;stroke:#fff;' + STROKE + '5;"/>'
            + '<circle cx="115.5" cy="20" r="8" style="fill:#ffffff;"/>'
        ),
        "eyes": (
            '<rect x="70" y="94" width="91" height="28" rx="14" style="fill:#000;"/>'
            + '<path d="m80 108h71" style="fill:none;stroke:#fff;' + STROKE + '2;"/>'
            + '<path d="m85 108h12m37 0h12" style="fill:none;stroke:#00FFFF;' + STROKE + '8;"/>'
        ),
        "mouth": (
            '<rect x="92" y="138" width="47" height="18" rx="4" style="fill:#fff;stroke:#000;' + STROKE + '3;"/>'
            + '<path d="m104 138v18m12-18v18m12-18v18" style="fill:none;stroke:#000000;' + STROKE + '2;"/>'
        ),
    },
    # Girl
    "01": {
        "clo": (
            '<path d="' + TORSO + 'l-25.9 18.1-25.9-18.1a115.5 115.5 0 0 0-38.2 15.9z" style="fill:#f06;"/>'
            + '<path d="m89.6 195.6 25.9 18.1 25.9-18.1-3.6-3.1-22.3 11.3-22.3-11.3z" style="fill:#8e0039;"/>'
        ),
        "top": (
            '<path d="m115.5 40c-38 0-66 27-66 70 0 30 6 55 14 72l14-8c-8-20-10-45-6-66 20-4 40-16 50-32 '
            + '10 16 30 28 50 32 4 21 2 46-6 66l14 8c8-17 14-42 14-72 0-43-28-70-66-70z" style="fill:#ff9809;"/>'
            + '<path d="m82 62c10 10 22 14 33 14s23-4 33-14" style="fill:none;stroke:#ff9808;' + STROKE + '4;"/>'
            + '<circle cx="150" cy="44" r="9" style="fill:#ffc809;"/>'
            + '<circle cx="81" cy="44" r="9" style="fill:#ecff3b;"/>'
        ),
        "eyes": (
            '<path d="m84 110a7 9 0 1 0 14 0 7 9 0 1 0-14 0zm49 0a7 9 0 1 0 14 0 7 9 0 1 0-14 0z" style="fill:#000;"/>'
            + '<path d="m80 97 10-4m51 4-10-4" style="fill:none;stroke:#ff9809;' + STROKE + '3;"/>'
        ),
        "mouth": (
            '<path d="m103 145c7 7 18 7 25 0" style="fill:none;stroke:#000;' + STROKE + '4;"/>'
        ),
    },
    # Blonde
    "02": {
        "clo": (
            '<path d="' + TORSO + 'c-6.4 8.4-15.8 13.1-26.7 13.1s-20.3-4.7-26.7-13.1a115.5 115.5 0 0 0-37.4 15.6z" '
            + 'style="fill:#d12823;"/>'
        ),
        "top": (
            '<path d="m115.5 38c-36 0-62 26-62 62 0 26 4 48 12 64h18c-10-22-12-44-8-66 24 0 44-10 56-26 '
            + '4 16 18 26 32 28 2 22 0 44-10 64h18c8-16 12-38 12-64 0-36-32-62-68-62z" style="fill:#000;"/>'
            + '<path d="m70 92c14-4 26-12 34-24" style="fill:none;stroke:#fdff00;' + STROKE + '3;"/>'
            + '<path d="m161 92c-10-2-20-8-26-18" style="fill:none;stroke:#FFCC00;' + STROKE + '3;"/>'
            + '<path d="m138 40 14-12 4 18-4 18-14-12z" style="fill:#fc0;"/>'
            + '<circle cx="147" cy="40" r="5" style="fill:#ff0000;"/>'
        ),
        "eyes": (
            '<path d="m84 112c2-6 12-6 14 0m35 0c2-6 12-6 14 0" style="fill:none;stroke:#000;' + STROKE + '5;"/>'
            + '<path d="m80 100h20m31 0h20" style="fill:none;stroke:#00ffdc;' + STROKE + '3;"/>'
        ),
        "mouth": (
            '<path d="m104 144h23c0 8-5 12-11.5 12s-11.5-4-11.5-12z" style="fill:#d12823;"/>'
        ),
    },
    # Guy
    "03": {
        "clo": (
            '<path d="' + TORSO + 'l-25.9 22-25.9-22a115.5 115.5 0 0 0-38.2 15.9z" style="fill:#b4e1fa;"/>'
            + '<path d="m89.6 195.6-14 4.6 20 25.5 19.9-8z" style="fill:#5b5d6e;"/>'
            + '<path d="m141.4 195.6 14 4.6-20 25.5-19.9-8z" style="fill:#515262;"/>'
            + '<path d="m115.5 217.6-6 13h12z" style="fill:#a0d2f0;"/>'
            + '<path d="m108 210 7.5 7.6 7.5-7.6" style="fill:none;stroke:#a0d2f1;' + STROKE + '2;"/>'
        ),
        "top": (
            '<path d="m60 96c-4-30 14-52 40-58l6-14 10 12 12-12 4 16c22 6 40 26 40 56l-12-6-10 10-8-12-14 8-10-12'
            + '-12 10-10-12-10 14-12-8z" style="fill:#8eff45;"/>'
            + '<path d="m90 58 14-6m18 0 16 6" style="fill:none;stroke:#8eff46;' + STROKE + '3;"/>'
            + '<path d="m74 70c12-10 26-14 41-14" style="fill:none;stroke:#FFC600;' + STROKE + '3;"/>'
            + '<path d="m157 70c-12-10-26-14-41-14" style="fill:none;stroke:#D2001B;' + STROKE + '3;"/>'
        ),
        "eyes": (
            '<path d="m83 110h16m33 0h16" style="fill:none;stroke:#000;' + STROKE + '6;"/>'
        ),
        "mouth": (
            '<path d="m100 142h31c0 9-7 15-15.5 15s-15.5-6-15.5-15z" style="fill:#fff;stroke:#000;' + STROKE + '3;"/>'
        ),
    },
    # Country
    "04": {
        "clo": (
            '<path d="' + TORSO + 'c-6 7-15 11-25.9 11s-19.9-4-25.9-11a115.5 115.5 0 0 0-38.2 15.9z" '
            + 'style="fill:#901e0e;"/>'
            + '<path d="m72 202v26m87-26v26" style="fill:none;stroke:#ffbe1e;' + STROKE + '3;"/>'
            + '<path d="m58 216h115" style="fill:none;stroke:#ffbe1f;' + STROKE + '3;"/>'
            + '<path d="m108 208h15l-7.5 9z" style="fill:#c55f54;"/>'
        ),
        "top": (
            '<path d="m40 78c20 10 50 14 75.5 14s55.5-4 75.5-14c-6 14-30 24-75.5 24s-69.5-10-75.5-24z" '
            + 'style="fill:#583D00;"/>'
            + '<path d="m78 80c0-26 8-50 20-54 6-2 12 4 17.5 4s11.5-6 17.5-4c12 4 20 28 20 54-12 4-24 6-37.5 6'
            + 's-25.5-2-37.5-6z" style="fill:#AF892E;"/>'
            + '<path d="m78 70c12 4 24 6 37.5 6s25.5-2 37.5-6v10c-12 4-24 6-37.5 6s-25.5-2-37.5-6z" '
            + 'style="fill:#462D00;"/>'
            + '<path d="m130 74 6-10" style="fill:none;stroke:#a0a0a0;' + STROKE + '2;"/>'
        ),
        "eyes": (
            '<path d="m86 106a5 5 0 1 0 10 0 5 5 0 1 0-10 0zm49 0a5 5 0 1 0 10 0 5 5 0 1 0-10 0z" style="fill:#000;"/>'
        ),
        "mouth": (
            '<path d="m96 138c8-6 14-4 19.5 0 5.5-4 11.5-6 19.5 0-6 6-14 6-19.5 2-5.5 4-13.5 4-19.5-2z" '
            + 'style="fill:#000;"/>'
            + '<path d="m96 138c6 4 14 4 19.5 0" style="fill:none;stroke:#111;' + STROKE + '2;"/>'
            + '<path d="m106 150h19" style="fill:none;stroke:#000000;' + STROKE + '4;"/>'
            + '<path d="m110 154h11" style="fill:none;stroke:#111111;' + STROKE + '2;"/>'
        ),
    },
    # Geeknot
    "05": {
        "clo": (
            '<path d="' + TORSO + 'c-6 6-15 9-25.9 9s-19.9-3-25.9-9a115.5 115.5 0 0 0-38.2 15.9z" '
            + 'style="fill:#c7d4e2;"/>'
            + '<path d="m80 199 8 32" style="fill:none;stroke:#435363;' + STROKE + '6;"/>'
            + '<path d="m151 199-8 32" style="fill:none;stroke:#435364;' + STROKE + '6;"/>'
            + '<path d="m115.5 207-14-8v16z" style="fill:#141720;"/>'
            + '<path d="m115.5 207 14-8v16z" style="fill:#141721;"/>'
            + '<path d="m89.6 195.6 25.9 11.4-10 8-19-14z" style="fill:#e7ecf2;"/>'
            + '<path d="m141.4 195.6-25.9 11.4 10 8 19-14z" style="fill:#e7ecf3;"/>'
        ),
        "top": (
            '<path d="m56 100c0-36 26-62 59.5-62s59.5 26 59.5 62c-20-10-40-28-48-44-14 20-44 36-71 44z" '
            + 'style="fill:#ff9a00;"/>'
            + '<path d="m128 56c6 12 18 24 34 32" style="fill:none;stroke:#fdff00;' + STROKE + '4;"/>'
        ),
        "eyes": (
            '<circle cx="91" cy="108" r="15" style="fill:#000;stroke:#010101;' + STROKE + '4;"/>'
            + '<circle cx="140" cy="108" r="15" style="fill:#020202;stroke:#030303;' + STROKE + '4;"/>'
            + '<path d="m106 106c6-4 13-4 19 0" style="fill:none;stroke:#040404;' + STROKE + '4;"/>'
            + '<path d="m76 104-10-4m89 4 10-4" style="fill:none;stroke:#050505;' + STROKE + '4;"/>'
            + '<circle cx="91" cy="108" r="4" style="fill:#fff;"/>'
            + '<circle cx="140" cy="108" r="4" style="fill:#fefefe;"/>'
            + '<path d="m84 101 4-3" style="fill:none;stroke:#fdfdfd;' + STROKE + '2;"/>'
            + '<path d="m133 101 4-3" style="fill:none;stroke:#fcfcfc;' + STROKE + '2;"/>'
            + '<path d="m78 88c8-4 17-4 25 0" style="fill:none;stroke:#060606;' + STROKE + '4;"/>'
            + '<path d="m128 88c8-4 17-4 25 0" style="fill:none;stroke:#070707;' + STROKE + '4;"/>'
        ),
        "mouth": (
            '<path d="m103 146c8 5 17 5 25 0" style="fill:none;stroke:#000;' + STROKE + '4;"/>'
            + '<path d="m110 153h11" style="fill:none;stroke:#cf9f76;' + STROKE + '3;"/>'
        ),
    },
    # Asian
    "06": {
        "clo": (
            '<path d="' + TORSO + 'h-51.8a115.5 115.5 0 0 0-38.2 15.9z" style="fill:#ee2829;"/>'
            + '<path d="m89.6 195.6c6 10 15 16 25.9 16s19.9-6 25.9-16l-6-2c-4 8-11 12-19.9 12s-15.9-4-19.9-12z" '
            + 'style="fill:#ff0;"/>'
        ),
        "top": (
            '<path d="m54 112c-4-44 24-74 61.5-74s65.5 30 61.5 74c-8-14-20-26-36-32-12 10-36 14-52 8-14 4-28 12-35 24z" '
            + 'style="fill:#000;"/>'
            + '<path d="m80 80c10 4 24 4 35.5-2 11.5 6 25.5 6 35.5 2" style="fill:none;stroke:#111;' + STROKE + '4;"/>'
            + '<circle cx="115.5" cy="30" r="16" style="fill:#0a0a0a;"/>'
            + '<path d="m96 18 40 20" style="fill:none;stroke:#222;' + STROKE + '4;"/>'
            + '<circle cx="150" cy="52" r="7" style="fill:#ff4e4e;"/>'
            + '<path d="m104 42h23" style="fill:none;stroke:#1a1a1a;' + STROKE + '5;"/>'
            + '<path d="m64 104c2-12 8-20 16-26" style="fill:none;stroke:#000000;' + STROKE + '3;"/>'
            + '<path d="m167 104c-2-12-8-20-16-26" style="fill:none;stroke:#111111;' + STROKE + '3;"/>'
        ),
        "eyes": (
            '<path d="m82 110c4-4 12-4 16 0m35 0c4-4 12-4 16 0" style="fill:none;stroke:#000;' + STROKE + '5;"/>'
        ),
        "mouth": (
            '<path d="m102 144h27c0 8-6 13-13.5 13s-13.5-5-13.5-13z" style="fill:#fff;stroke:#000;' + STROKE + '3;"/>'
        ),
    },
    # Punk
    "07": {
        "clo": (
            '<path d="' + TORSO + 'l-25.9 19-25.9-19a115.5 115.5 0 0 0-38.2 15.9z" style="fill:#ff0000;"/>'
            + '<path d="m76 206 4 4m71-4-4 4m-66 6 4 4m61-4-4 4" style="fill:none;stroke:#ff9809;' + STROKE + '3;"/>'
            + '<path d="m115.5 214.6v16.4" style="fill:none;stroke:#491f49;' + STROKE + '3;"/>'
        ),
        "top": (
            '<path d="m100 62 6-44 9.5 12 9.5-12 6 44c-10-4-21-4-31 0z" style="fill:#dd104f;"/>'
            + '<path d="m106 18 9.5 30" style="fill:none;stroke:#dd104e;' + STROKE + '3;"/>'
            + '<path d="m102 40h27" style="fill:none;stroke:#f73b6c;' + STROKE + '3;"/>'
            + '<path d="m60 102c-2-20 6-36 20-46m91 46c2-20-6-36-20-46" style="fill:none;stroke:#dd104d;' + STROKE + '4;"/>'
        ),
        "eyes": (
            '<ellipse cx="91" cy="108" rx="11" ry="8" style="fill:#e91e63;"/>'
            + '<circle cx="91" cy="108" r="4" style="fill:#000;"/>'
            + '<ellipse cx="140" cy="108" rx="11" ry="8" style="fill:#e91e62;"/>'
            + '<circle cx="140" cy="108" r="4" style="fill:#010101;"/>'
            + '<path d="m78 94 24 4" style="fill:none;stroke:#020202;' + STROKE + '4;"/>'
            + '<path d="m153 94-24 4" style="fill:none;stroke:#030303;' + STROKE + '4;"/>'
        ),
        "mouth": (
            '<path d="m104 146c6 6 17 6 23 0" style="fill:none;stroke:#f73b6c;' + STROKE + '5;"/>'
            + '<path d="m134 148 4 6" style="fill:none;stroke:#000;' + STROKE + '3;"/>'
        ),
    },
    # Afrohair
    "08": {
        "clo": (
            '<path d="' + TORSO + 'c-6 9-15 14-25.9 14s-19.9-5-25.9-14a115.5 115.5 0 0 0-38.2 15.9z" '
            + 'style="fill:#571e57;"/>'
            + '<path d="m62 212c18 6 36 9 53.5 9s35.5-3 53.5-9" style="fill:none;stroke:#ff0;' + STROKE + '4;"/>'
        ),
        "top": (
            '<path d="m115.5 14c-44 0-76 28-76 68 0 18 6 34 16 46 2-22 8-40 22-52 12 6 26 8 38 8s26-2 38-8'
            + 'c14 12 20 30 22 52 10-12 16-28 16-46 0-40-32-68-76-68z" style="fill:#de3b00;"/>'
            + '<path d="m70 50c8-10 20-16 32-18m58 18c-8-10-20-16-32-18" style="fill:none;stroke:#000;' + STROKE + '3;"/>'
        ),
        "eyes": (
            '<path d="m82 108a9 9 0 1 0 18 0 9 9 0 1 0-18 0zm49 0a9 9 0 1 0 18 0 9 9 0 1 0-18 0z" '
            + 'style="fill:#795548;"/>'
            + '<path d="m87 108a4 4 0 1 0 8 0 4 4 0 1 0-8 0zm49 0a4 4 0 1 0 8 0 4 4 0 1 0-8 0z" style="fill:#000;"/>'
        ),
        "mouth": (
            '<path d="m100 144c10 10 21 10 31 0-10 4-21 4-31 0z" style="fill:#ff0000;"/>'
        ),
    },
    # Normie Female
    "09": {
        "clo": (
            '<path d="' + TORSO + 'c-6 7-15 11-25.9 11s-19.9-4-25.9-11a115.5 115.5 0 0 0-38.2 15.9z" '
            + 'style="fill:#101010;"/>'
            + '<path d="m72 214h14m59 0h14" style="fill:none;stroke:#fff;' + STROKE + '4;"/>'
            + '<path d="m108 222h15" style="fill:none;stroke:#ffffff;' + STROKE + '4;"/>'
        ),
        "top": (
            '<path d="m115.5 40c-36 0-64 26-64 66 0 40 6 66 16 80h20c-10-20-14-48-12-76 20-2 36-12 40-30 '
            + '4 18 20 28 40 30 2 28-2 56-12 76h20c10-14 16-40 16-80 0-40-28-66-64-66z" style="fill:#531148;"/>'
            + '<path d="m160 60c16 10 22 30 18 56" style="fill:none;stroke:#531147;' + STROKE + '8;"/>'
            + '<path d="m96 56c-8 8-12 18-14 28" style="fill:none;stroke:#531146;' + STROKE + '3;"/>'
            + '<path d="m74 76 10-10" style="fill:none;stroke:#531145;' + STROKE + '4;"/>'
        ),
        "eyes": (
            '<path d="m83 110c4 4 12 4 16 0m33 0c4 4 12 4 16 0" style="fill:none;stroke:#000;' + STROKE + '4;"/>'
            + '<path d="m84 110a7 7 0 1 0 14 0 7 7 0 1 0-14 0zm49 0a7 7 0 1 0 14 0 7 7 0 1 0-14 0z" style="fill:#fff;"/>'
            + '<path d="m88 110a3 3 0 1 0 6 0 3 3 0 1 0-6 0zm49 0a3 3 0 1 0 6 0 3 3 0 1 0-6 0z" '
            + 'style="fill:#010101;"/>'
        ),
        "mouth": (
            '<path d="m106 148c6 3 13 3 19 0" style="fill:none;stroke:#000;' + STROKE + '4;"/>'
        ),
    },
    # Older
    "10": {
        "clo": (
            '<path d="' + TORSO + 'l-25.9 24-25.9-24a115.5 115.5 0 0 0-38.2 15.9z" style="fill:#354B65;"/>'
            + '<path d="m89.6 195.6 25.9 24 25.9-24-6-3-19.9 14-19.9-14z" style="fill:#3D8EBB;"/>'
            + '<path d="m115.5 206.6-5 6 5 18 5-18z" style="fill:#89D0DA;"/>'
            + '<path d="m148 212h12" style="fill:none;stroke:#00FFFD;' + STROKE + '3;"/>'
        ),
        "top": (
            '<path d="m56 118c-4-20 0-38 12-50 2 16 6 30 12 40z" style="fill:#fff;"/>'
            + '<path d="m175 118c4-20 0-38-12-50-2 16-6 30-12 40z" style="fill:#ffffff;"/>'
            + '<path d="m58 84c4-28 28-46 57.5-46s53.5 18 57.5 46c-18-6-38-8-57.5-8s-39.5 2-57.5 8z" '
            + 'style="fill:#633b1d;"/>'
        ),
        "eyes": (
            '<path d="m86 108h10m39 0h10" style="fill:none;stroke:#000;' + STROKE + '5;"/>'
            + '<path d="m76 114-4 3m87-3 4 3" style="fill:none;stroke:#000000;' + STROKE + '2;"/>'
        ),
        "mouth": (
            '<path d="m94 140c8-6 14-4 21.5 0 7.5-4 13.5-6 21.5 0-8 8-15 6-21.5 3-6.5 3-13.5 5-21.5-3z" '
            + 'style="fill:#222;"/>'
            + '<path d="m108 152h15" style="fill:none;stroke:#fff;' + STROKE + '3;"/>'
        ),
    },
    # Firehair
    "11": {
        "clo": (
            '<path d="' + TORSO + 'c-6 7-15 11-25.9 11s-19.9-4-25.9-11a115.5 115.5 0 0 0-38.2 15.9z" '
            + 'style="fill:#e6e9ee;"/>'
            + '<path d="m115.5 214c-8 0-12 6-12 11 0 3 1 5 2 6h20c1-1 2-3 2-6 0-5-4-11-12-11z" style="fill:#f1543f;"/>'
            + '<path d="m115.5 220c-4 0-6 4-6 7l1 4h10l1-4c0-3-2-7-6-7z" style="fill:#ff7058;"/>'
            + '<path d="m98 206v12" style="fill:none;stroke:#fff;' + STROKE + '2;"/>'
            + '<path d="m133 206v12" style="fill:none;stroke:#ffffff;' + STROKE + '2;"/>'
        ),
        "top": (
            '<path d="m62 100c-6-26 2-52 22-64-2 14 2 26 10 32-2-16 6-34 22-44-2 16 4 30 14 38 0-14 8-26 20-32'
            + '-4 14 0 28 10 36 4-8 6-16 6-24 12 14 16 34 10 58-12-16-30-24-50-24s-44 8-64 24z" style="fill:#ffc;"/>'
            + '<path d="m86 58c4 8 10 12 16 14" style="fill:none;stroke:#ffffcc;' + STROKE + '3;"/>'
            + '<path d="m132 50c2 8 6 14 12 18" style="fill:none;stroke:#fffc;' + STROKE + '3;"/>'
        ),
        "eyes": (
            '<path d="m86 108a5 5 0 1 0 10 0 5 5 0 1 0-10 0zm49 0a5 5 0 1 0 10 0 5 5 0 1 0-10 0z" style="fill:#000;"/>'
            + '<path d="m80 96c6-4 14-4 20 0m31 0c6-4 14-4 20 0" style="fill:none;stroke:#000000;' + STROKE + '4;"/>'
            + '<path d="m84 122h14m35 0h14" style="fill:none;stroke:#57FFFD;' + STROKE + '3;"/>'
        ),
        "mouth": (
            '<path d="m102 144c8 8 19 8 27 0" style="fill:none;stroke:#191919;' + STROKE + '4;"/>'
            + '<path d="m98 142 4 2m27 0 4-2" style="fill:none;stroke:#191918;' + STROKE + '3;"/>'
        ),
    },
    # Blond
    "12": {
        "clo": (
            '<path d="' + TORSO + 'c-4 12-14 20-25.9 20s-21.9-8-25.9-20a115.5 115.5 0 0 0-38.2 15.9z" '
            + 'style="fill:#2385c6;"/>'
            + '<path d="m104 214v12" style="fill:none;stroke:#b8d0e0;' + STROKE + '3;"/>'
            + '<path d="m127 214v12" style="fill:none;stroke:#b8d0e1;' + STROKE + '3;"/>'
        ),
        "top": (
            '<path d="m56 104c-6-40 20-68 59.5-68 30 0 54 16 60 44-20-12-44-14-66-6-20 6-38 16-53.5 30z" '
            + 'style="fill:#fff510;"/>'
            + '<path d="m96 50c18-4 38-2 56 8" style="fill:none;stroke:#fff511;' + STROKE + '4;"/>'
        ),
        "eyes": (
            '<path d="m78 108c4-10 22-10 26 0-4 8-22 8-26 0zm49 0c4-10 22-10 26 0-4 8-22 8-26 0z" '
            + 'style="fill:#7fb5a2;"/>'
            + '<path d="m83 108c3-6 13-6 16 0-3 5-13 5-16 0zm49 0c3-6 13-6 16 0-3 5-13 5-16 0z" style="fill:#d1eddf;"/>'
            + '<path d="m88 108a3 3 0 1 0 6 0 3 3 0 1 0-6 0zm49 0a3 3 0 1 0 6 0 3 3 0 1 0-6 0z" style="fill:#301e19;"/>'
        ),
        "mouth": (
            '<path d="m104 146c7 4 16 4 23 0" style="fill:none;stroke:#000;' + STROKE + '4;"/>'
            + '<path d="m102 160c9 3 18 3 27 0" style="fill:none;stroke:#4d4d4d;' + STROKE + '3;"/>'
        ),
    },
    # Ateam
    "13": {
        "clo": (
            '<path d="' + TORSO + 'c-6 7-15 11-25.9 11s-19.9-4-25.9-11a115.5 115.5 0 0 0-38.2 15.9z" '
            + 'style="fill:#efedee;"/>'
            + '<path d="m70 200 10 31" style="fill:none;stroke:#00a1e0;' + STROKE + '6;"/>'
            + '<path d="m161 200-10 31" style="fill:none;stroke:#00a1e1;' + STROKE + '6;"/>'
            + '<path d="m89.6 195.6c6 7 15 11 25.9 11s19.9-4 25.9-11" style="fill:none;stroke:#efedef;' + STROKE + '4;"/>'
            + '<circle cx="115.5" cy="220" r="6" style="fill:#ffce1c;"/>'
        ),
        "top": (
            '<path d="m58 100c0-38 24-62 57.5-62s57.5 24 57.5 62c-16-14-36-22-57.5-22s-41.5 8-57.5 22z" '
            + 'style="fill:#000;"/>'
            + '<path d="m60 86c18-8 36-12 55.5-12s37.5 4 55.5 12" style="fill:none;stroke:#ffe900;' + STROKE + '6;"/>'
            + '<path d="m60 100v20m111-20v20" style="fill:none;stroke:#000000;' + STROKE + '5;"/>'
            + '<circle cx="178" cy="132" r="4" style="fill:#ffe901;"/>'
        ),
        "eyes": (
            '<path d="m84 106 12 4m35 0 12-4" style="fill:none;stroke:#000;' + STROKE + '5;"/>'
        ),
        "mouth": (
            '<path d="m100 140h31v6c0 6-7 10-15.5 10s-15.5-4-15.5-10z" style="fill:#3a484a;"/>'
            + '<path d="m106 148h19" style="fill:none;stroke:#000;' + STROKE + '3;"/>'
        ),
    },
    # Rasta
    "14": {
        "clo": (
            '<path d="' + TORSO + 'c-6 7-15 11-25.9 11s-19.9-4-25.9-11a115.5 115.5 0 0 0-38.2 15.9z" '
            + 'style="fill:#708913;"/>'
            + '<path d="m64 205h103" style="fill:none;stroke:#fdea14;' + STROKE + '5;"/>'
            + '<path d="m58 213h115" style="fill:none;stroke:#708914;' + STROKE + '5;"/>'
            + '<path d="m60 221h111" style="fill:none;stroke:#fdea15;' + STROKE + '5;"/>'
            + '<path d="m68 229h95" style="fill:none;stroke:#708915;' + STROKE + '5;"/>'
        ),
        "top": (
            '<path d="m54 104c-2-40 24-66 61.5-66s63.5 26 61.5 66c-14-14-36-24-61.5-24s-47.5 10-61.5 24z" '
            + 'style="fill:#323950;"/>'
            + '<path d="m58 100c-6 24-6 48-2 72" style="fill:none;stroke:#323951;' + STROKE + '8;"/>'
            + '<path d="m64 88c-6 26-6 52-2 78" style="fill:none;stroke:#323952;' + STROKE + '8;"/>'
            + '<path d="m70 78c-6 28-8 56-4 84" style="fill:none;stroke:#323953;' + STROKE + '8;"/>'
            + '<path d="m78 70c-6 16-8 32-8 48" style="fill:none;stroke:#323954;' + STROKE + '8;"/>'
            + '<path d="m173 100c6 24 6 48 2 72" style="fill:none;stroke:#323955;' + STROKE + '8;"/>'
            + '<path d="m167 88c6 26 6 52 2 78" style="fill:none;stroke:#323956;' + STROKE + '8;"/>'
            + '<path d="m161 78c6 28 8 56 4 84" style="fill:none;stroke:#323957;' + STROKE + '8;"/>'
            + '<path d="m153 70c6 16 8 32 8 48" style="fill:none;stroke:#323958;' + STROKE + '8;"/>'
            + '<path d="m52 120c-2 20 0 40 6 56" style="fill:none;stroke:#323959;' + STROKE + '8;"/>'
            + '<path d="m66 130c-2 16 0 32 4 46" style="fill:none;stroke:#32395a;' + STROKE + '8;"/>'
            + '<path d="m84 64c-4 10-6 20-6 30" style="fill:none;stroke:#32395b;' + STROKE + '8;"/>'
            + '<path d="m96 58c-2 8-2 16-2 24" style="fill:none;stroke:#32395c;' + STROKE + '8;"/>'
            + '<path d="m179 120c2 20 0 40-6 56" style="fill:none;stroke:#32395d;' + STROKE + '8;"/>'
            + '<path d="m165 130c2 16 0 32-4 46" style="fill:none;stroke:#32395e;' + STROKE + '8;"/>'
            + '<path d="m147 64c4 10 6 20 6 30" style="fill:none;stroke:#32395f;' + STROKE + '8;"/>'
            + '<path d="m135 58c2 8 2 16 2 24" style="fill:none;stroke:#323960;' + STROKE + '8;"/>'
        ),
        "eyes": (
            '<path d="m84 110c4-3 10-3 14 0m35 0c4-3 10-3 14 0" style="fill:none;stroke:#000;' + STROKE + '5;"/>'
        ),
        "mouth": (
            '<path d="m100 144c10 8 21 8 31 0" style="fill:#444;stroke:#000;' + STROKE + '3;"/>'
        ),
    },
    # Street
    "15": {
        "clo": (
            '<path d="' + TORSO + 'c-4 10-14 16-25.9 16s-21.9-6-25.9-16a115.5 115.5 0 0 0-38.2 15.9z" '
            + 'style="fill:#000;"/>'
            + '<path d="m100 220h31" style="fill:none;stroke:#00FFFF;' + STROKE + '4;"/>'
        ),
        "top": (
            '<path d="m60 96c0-34 24-58 55.5-58s55.5 24 55.5 58c-18-6-36-8-55.5-8s-37.5 2-55.5 8z" style="fill:#fff;"/>'
            + '<path d="m60 96c-14 2-24 6-28 12 24-2 52-6 83.5-6" style="fill:#ffffff;"/>'
            + '<path d="m108 62h15v12h-15z" style="fill:#fffffe;"/>'
            + '<circle cx="115.5" cy="38" r="4" style="fill:#fffffd;"/>'
            + '<path d="m82 50c10-6 22-8 33.5-8" style="fill:none;stroke:#fffffc;' + STROKE + '2;"/>'
        ),
        "eyes": (
            '<path d="m74 102h83" style="fill:none;stroke:#000;' + STROKE + '4;"/>'
            + '<path d="m78 102h28c0 10-6 16-14 16s-14-6-14-16zm47 0h28c0 10-6 16-14 16s-14-6-14-16z" '
            + 'style="fill:#008;"/>'
            + '<path d="m84 106 6-2m41 2 6-2" style="fill:none;stroke:#0ff;' + STROKE + '2;"/>'
        ),
        "mouth": (
            '<path d="m104 144h23c0 6-5 10-11.5 10s-11.5-4-11.5-10z" style="fill:#fff;stroke:#000;' + STROKE + '3;"/>'
        ),
    },
}
